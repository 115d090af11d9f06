from __future__ import annotations

import logging
from typing import Optional

from ..common.pagination import PageRequest, PaginatedRequestDto
from ..common.responses import GenericResponseDto, PaginatedResponseDto, error_response
from ..core.enums import ErrorCode
from ..core.exceptions import BusinessError
from ..database.transaction import TransactionManager
from . import mapper
from .dto import OfficeDto
from .repository import OfficeRepository

logger = logging.getLogger(__name__)

OFFICE_EXISTS_MESSAGE = "Error. Office already exists."
OFFICE_NOT_FOUND_MESSAGE = "Error. Office does not exist."


class OfficeService:
    """Use case: manage offices."""

    def __init__(self, offices: OfficeRepository, transactions: TransactionManager):
        self._offices = offices
        self._tx = transactions

    def find_offices(self, request: PaginatedRequestDto) -> PaginatedResponseDto[OfficeDto]:
        logger.debug("find_offices %s", request)
        page_request = PageRequest.from_offset(request.offset, request.limit)

        with self._tx.scope():
            page = self._offices.find_all(page_request)
            data = [mapper.to_dto(o) for o in page.items]

        return PaginatedResponseDto[OfficeDto](
            page=page_request.page,
            size=page_request.size,
            total_elements=page.total_elements,
            data=data,
        )

    def find(self, office_id: int) -> Optional[GenericResponseDto[OfficeDto]]:
        with self._tx.scope():
            office = self._offices.find_by_id(office_id)
            if office is None:
                return None
            return GenericResponseDto[OfficeDto](body=mapper.to_dto(office))

    def create(self, dto: OfficeDto) -> GenericResponseDto[OfficeDto]:
        with self._tx.scope():
            if self._exist_name(dto.name):
                logger.info("Office request rejected: %s", ErrorCode.OFFICE_ALREADY_EXISTS.name)
                return error_response(ErrorCode.OFFICE_ALREADY_EXISTS, OFFICE_EXISTS_MESSAGE)

            saved = self._offices.save(mapper.to_entity(dto))

        dto.id = saved.office_id
        logger.info("Created office %s (id=%s)", saved.name, saved.office_id)
        return GenericResponseDto[OfficeDto](body=dto)

    def update(self, dto: OfficeDto) -> GenericResponseDto[bool]:
        with self._tx.scope():
            current = self._offices.find_by_id(dto.id)
            if current is None:
                raise BusinessError(ErrorCode.OFFICE_NOT_FOUND, OFFICE_NOT_FOUND_MESSAGE)

            match = self._offices.find_by_name(dto.name)
            if match is not None and match.office_id != current.office_id:
                logger.info("Office request rejected: %s", ErrorCode.OFFICE_ALREADY_EXISTS.name)
                return error_response(ErrorCode.OFFICE_ALREADY_EXISTS, OFFICE_EXISTS_MESSAGE)

            self._offices.save(mapper.to_entity(dto, office_id=current.office_id))

        logger.info("Updated office id=%s", current.office_id)
        return GenericResponseDto[bool](body=True)

    def delete(self, office_id: int) -> GenericResponseDto[bool]:
        with self._tx.scope():
            office = self._offices.find_by_id(office_id)
            if office is None:
                raise BusinessError(ErrorCode.OFFICE_NOT_FOUND, OFFICE_NOT_FOUND_MESSAGE)

            self._offices.delete(office)

        logger.info("Deleted office id=%s", office_id)
        return GenericResponseDto[bool](body=True)

    def exist_name(self, name: str) -> bool:
        with self._tx.scope():
            return self._exist_name(name)

    def _exist_name(self, name: str) -> bool:
        return self._offices.find_by_name(name) is not None
