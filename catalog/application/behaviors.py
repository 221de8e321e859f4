"""
디스패처 파이프라인 동작(behavior)

각 동작은 (request, call_next) -> 응답 형태의 비동기 callable입니다.
call_next()를 호출하지 않으면 파이프라인이 중단되고 핸들러는 실행되지 않습니다.
새로운 횡단 관심사는 디스패처의 behaviors 목록에 추가합니다.
"""

import logging
from typing import Any, Awaitable, Callable

from catalog.application.requests import Request
from catalog.application.validators import validate
from catalog.core.result import Result

logger = logging.getLogger(__name__)

CallNext = Callable[[], Awaitable[Any]]
Behavior = Callable[[Request, CallNext], Awaitable[Any]]


async def validation_behavior(request: Request, call_next: CallNext) -> Any:
    """
    핸들러 실행 전에 요청을 검증합니다.

    위반이 있으면 핸들러를 호출하지 않고 Result.invalid를 반환합니다.
    """
    violations = validate(request)
    if violations:
        return Result.invalid(violations)
    return await call_next()


async def logging_behavior(request: Request, call_next: CallNext) -> Any:
    """요청 디스패치와 실패 결과를 기록합니다."""
    request_name = type(request).__name__
    logger.debug("Dispatching %s", request_name)

    response = await call_next()

    if isinstance(response, Result) and not response.is_success:
        if response.is_invalid:
            logger.info("%s rejected by validation: %s", request_name, response.error)
        else:
            logger.info("%s failed: %s", request_name, response.error)
    return response


DEFAULT_BEHAVIORS: tuple[Behavior, ...] = (logging_behavior, validation_behavior)
