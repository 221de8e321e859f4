"""
요청 디스패처 (mediator)

요청 타입별로 정확히 하나의 핸들러를 등록하고,
파이프라인 동작을 순서대로 거친 뒤 핸들러를 실행합니다.
"""

import asyncio
from functools import partial
from typing import Any, Iterable, Optional

from catalog.application.behaviors import DEFAULT_BEHAVIORS, Behavior
from catalog.application.handlers import RequestHandler
from catalog.application.requests import Request
from catalog.core.exceptions import (
    ConfigurationError,
    HandlerAlreadyRegisteredError,
    HandlerNotRegisteredError,
)


class Dispatcher:
    """
    요청 타입 → 핸들러 매핑과 파이프라인 동작 목록을 가진 디스패처

    등록은 기동 시점에만 수행하고 freeze() 이후에는 상태가 바뀌지 않으므로
    여러 요청이 동시에 send()를 호출해도 안전합니다.

    Example:
        dispatcher = Dispatcher()
        dispatcher.register(GetProductById, GetProductByIdHandler(repository))
        dispatcher.freeze()
        result = await dispatcher.send(GetProductById(id=1))
    """

    def __init__(self, behaviors: Iterable[Behavior] = DEFAULT_BEHAVIORS):
        self._handlers: dict[type, RequestHandler] = {}
        self._behaviors: tuple[Behavior, ...] = tuple(behaviors)
        self._frozen = False

    def register(self, request_type: type, handler: RequestHandler) -> None:
        """
        요청 타입에 핸들러를 등록합니다.

        Raises:
            HandlerAlreadyRegisteredError: 이미 핸들러가 등록된 타입인 경우
            ConfigurationError: freeze() 이후에 등록하려는 경우
        """
        if self._frozen:
            raise ConfigurationError("Dispatcher registrations are frozen")
        if request_type in self._handlers:
            raise HandlerAlreadyRegisteredError(request_type)
        self._handlers[request_type] = handler

    def freeze(self) -> None:
        """등록을 종료합니다."""
        self._frozen = True

    def handler_for(self, request_type: type) -> RequestHandler:
        """
        요청 타입에 등록된 핸들러를 반환합니다.

        Raises:
            HandlerNotRegisteredError: 등록된 핸들러가 없는 경우
        """
        try:
            return self._handlers[request_type]
        except KeyError:
            raise HandlerNotRegisteredError(request_type) from None

    async def send(
        self, request: Request, cancel_event: Optional[asyncio.Event] = None
    ) -> Any:
        """
        요청을 파이프라인에 통과시킨 뒤 핸들러 결과를 그대로 반환합니다.

        플로우:
        1. 요청의 런타임 타입으로 핸들러 조회 (없으면 구성 오류)
        2. 파이프라인 동작을 등록 순서대로 실행 (검증 실패 시 중단)
        3. 핸들러 실행 후 결과 반환

        Args:
            request: 요청 객체
            cancel_event: 호출자가 설정하면 변경 작업을 중단하는 취소 신호

        Returns:
            핸들러 반환값 (값 또는 Result), 검증 실패 시 Result.invalid
        """
        handler = self.handler_for(type(request))

        async def call_handler() -> Any:
            return await handler.handle(request, cancel_event)

        call_next = call_handler
        for behavior in reversed(self._behaviors):
            call_next = partial(behavior, request, call_next)

        return await call_next()
