import pydantic
import pytest

from office_service.common.responses import GenericResponseDto, HeaderDto, error_response
from office_service.common.validators import error_code_for, header_for
from office_service.core.enums import ErrorCode
from office_service.core.exceptions import BusinessError, DomainError, ValidationError
from office_service.users.dto import UserDto


def _validation_error(payload) -> pydantic.ValidationError:
    with pytest.raises(pydantic.ValidationError) as exc_info:
        UserDto.model_validate(payload)
    return exc_info.value


def test_missing_field_maps_to_required_field():
    exc = _validation_error({"email": "a@x.com"})

    header = header_for(exc)

    assert header.code == ErrorCode.REQUIRED_FIELD.code
    assert header.message.startswith("username")


def test_long_field_maps_to_exceeds_max_length():
    exc = _validation_error({"username": "u", "email": "e" * 101})

    assert error_code_for(exc) == ErrorCode.EXCEEDS_MAX_LENGTH


def test_wrong_type_maps_to_unknown_error():
    exc = _validation_error({"username": "u", "email": "a@x.com", "roles": "admin"})

    assert error_code_for(exc) == ErrorCode.UNKNOWN_ERROR


def test_error_response_is_error():
    resp = error_response(ErrorCode.ROLE_NOT_FOUND, "missing role")

    assert resp.is_error
    assert resp.body is None
    assert resp.header == HeaderDto(code=203, message="missing role")


def test_success_envelope_is_not_error():
    assert not GenericResponseDto[bool](body=True).is_error
    assert not GenericResponseDto[bool](header=HeaderDto(code=0), body=True).is_error


def test_exception_codes():
    assert DomainError("boom").error_code == ErrorCode.UNKNOWN_ERROR
    assert ValidationError("bad").error_code == ErrorCode.REQUIRED_FIELD
    err = BusinessError(ErrorCode.USER_NOT_FOUND)
    assert err.error_code == ErrorCode.USER_NOT_FOUND
    assert err.message == "USER_NOT_FOUND"
