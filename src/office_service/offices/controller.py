from __future__ import annotations

from flask import Flask, request

from ..common.http import json_response
from ..common.pagination import PaginatedRequestDto
from ..container import Container
from .dto import OfficeDto


def register(app: Flask, container: Container) -> None:
    @app.get("/api/offices", endpoint="list_offices")
    def list_offices():
        paging = PaginatedRequestDto.model_validate(request.args.to_dict())
        return json_response(container.office_service.find_offices(paging))

    @app.get("/api/offices/<int:office_id>", endpoint="get_office")
    def get_office(office_id: int):
        response = container.office_service.find(office_id)
        if response is None:
            return "", 404
        return json_response(response)

    @app.post("/api/offices", endpoint="create_office")
    def create_office():
        dto = OfficeDto.model_validate(request.get_json(silent=True) or {})
        return json_response(container.office_service.create(dto))

    @app.put("/api/offices/<int:office_id>", endpoint="update_office")
    def update_office(office_id: int):
        dto = OfficeDto.model_validate(request.get_json(silent=True) or {})
        dto.id = office_id
        return json_response(container.office_service.update(dto))

    @app.delete("/api/offices/<int:office_id>", endpoint="delete_office")
    def delete_office(office_id: int):
        return json_response(container.office_service.delete(office_id))
