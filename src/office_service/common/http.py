from __future__ import annotations

import logging

from flask import Flask, jsonify
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from ..core.enums import NOT_FOUND_CODES, ErrorCode
from ..core.exceptions import BusinessError, DomainError
from .responses import GenericResponseDto, HeaderDto, error_response
from .validators import header_for

logger = logging.getLogger(__name__)


def json_response(payload: BaseModel, status: int = 200):
    return jsonify(payload.model_dump(mode="json", by_alias=True)), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(BusinessError)
    def handle_business_error(exc: BusinessError):
        status = 404 if exc.error_code in NOT_FOUND_CODES else 400
        logger.info("Business error %s: %s", exc.error_code.name, exc.message)
        return json_response(error_response(exc.error_code, exc.message), status)

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        logger.info("Rejected request (%s): %s", exc.error_code.name, exc.message)
        return json_response(error_response(exc.error_code, exc.message), 400)

    @app.errorhandler(PydanticValidationError)
    def handle_request_validation(exc: PydanticValidationError):
        header = header_for(exc)
        logger.info("Invalid request payload: %s", header.message)
        return json_response(GenericResponseDto(header=header), 400)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc

        logger.exception("Unhandled error while serving request")
        message = f"Unexpected error: {exc}" if app.config.get("DEBUG") else "Unexpected error"
        return json_response(GenericResponseDto(header=HeaderDto(code=ErrorCode.UNKNOWN_ERROR.code, message=message)), 500)
