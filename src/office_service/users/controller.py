from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_response
from ..common.pagination import PaginatedRequestDto
from ..container import Container
from .dto import UserDto


def register(app: Flask, container: Container) -> None:
    @app.get("/api/users", endpoint="list_users")
    def list_users():
        paging = PaginatedRequestDto.model_validate(request.args.to_dict())
        return json_response(container.user_service.find_users(paging))

    @app.get("/api/users/<int:user_id>", endpoint="get_user")
    def get_user(user_id: int):
        response = container.user_service.find(user_id)
        if response is None:
            return "", 404
        return json_response(response)

    @app.post("/api/users", endpoint="create_user")
    def create_user():
        dto = UserDto.model_validate(request.get_json(silent=True) or {})
        return json_response(container.user_service.create(dto))

    @app.put("/api/users/<int:user_id>", endpoint="update_user")
    def update_user(user_id: int):
        dto = UserDto.model_validate(request.get_json(silent=True) or {})
        dto.id = user_id
        return json_response(container.user_service.update(dto))

    @app.delete("/api/users/<int:user_id>", endpoint="delete_user")
    def delete_user(user_id: int):
        return json_response(container.user_service.delete(user_id))

    @app.get("/api/users/username/<username>/exists", endpoint="user_username_exists")
    def username_exists(username: str):
        return jsonify({"exists": container.user_service.exist_username(username)})

    @app.get("/api/users/email/<email>/exists", endpoint="user_email_exists")
    def email_exists(email: str):
        return jsonify({"exists": container.user_service.exist_email(email)})

    @app.get("/api/roles/<int:role_id>/exists", endpoint="role_exists")
    def role_exists(role_id: int):
        return jsonify({"exists": container.user_service.exist_role(role_id)})
