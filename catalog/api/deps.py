"""
FastAPI 의존성 주입 함수들

디스패처, 취소 신호 등의 의존성을 제공합니다.
"""

import asyncio
from typing import AsyncGenerator

from fastapi import Request

from catalog.application.dispatcher import Dispatcher


def get_dispatcher(request: Request) -> Dispatcher:
    """
    애플리케이션 기동 시 구성된 디스패처를 반환하는 의존성 함수

    Example:
        @router.get("/products")
        async def list_products(dispatcher: Dispatcher = Depends(get_dispatcher)):
            return await dispatcher.send(GetAllProducts())
    """
    return request.app.state.dispatcher


async def get_cancel_event(request: Request) -> AsyncGenerator[asyncio.Event, None]:
    """
    클라이언트 연결이 끊기면 설정되는 취소 신호를 제공하는 의존성 함수

    백그라운드 태스크가 앱 설정의 disconnect_poll_seconds 주기로 연결 상태를 확인합니다.

    Yields:
        asyncio.Event: 연결이 끊기면 set() 되는 이벤트
    """
    poll_seconds = request.app.state.settings.disconnect_poll_seconds
    cancel_event = asyncio.Event()

    async def watch_disconnect() -> None:
        while not cancel_event.is_set():
            if await request.is_disconnected():
                cancel_event.set()
                return
            await asyncio.sleep(poll_seconds)

    # 핸들러가 이벤트 루프에 제어를 넘기기 전에 끊긴 연결도 감지
    if await request.is_disconnected():
        cancel_event.set()

    watcher = asyncio.create_task(watch_disconnect())
    try:
        yield cancel_event
    finally:
        watcher.cancel()
