"""Tests for Dispatcher."""

import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from catalog.application.behaviors import logging_behavior, validation_behavior
from catalog.application.dispatcher import Dispatcher
from catalog.application.handlers import RequestHandler
from catalog.application.registry import build_dispatcher
from catalog.application.requests import (
    CreateProduct,
    DeleteProduct,
    GetAllProducts,
    GetProductById,
    UpdateProduct,
)
from catalog.core.exceptions import (
    ConfigurationError,
    HandlerAlreadyRegisteredError,
    HandlerNotRegisteredError,
)
from catalog.core.result import Result


def make_handler(return_value=None) -> AsyncMock:
    handler = AsyncMock(spec=RequestHandler)
    handler.handle.return_value = return_value
    return handler


class TestRegistration:
    """Test: 핸들러 등록 테스트"""

    def test_register_twice_fails(self):
        """Test: 같은 요청 타입에 두 번 등록하면 구성 오류"""
        dispatcher = Dispatcher()
        dispatcher.register(GetAllProducts, make_handler())

        with pytest.raises(HandlerAlreadyRegisteredError):
            dispatcher.register(GetAllProducts, make_handler())

    def test_register_after_freeze_fails(self):
        """Test: freeze 이후 등록하면 구성 오류"""
        dispatcher = Dispatcher()
        dispatcher.freeze()

        with pytest.raises(ConfigurationError):
            dispatcher.register(GetAllProducts, make_handler())

    @pytest.mark.asyncio
    async def test_send_without_handler_fails(self):
        """Test: 핸들러가 없는 요청 타입은 구성 오류"""
        dispatcher = Dispatcher()

        with pytest.raises(HandlerNotRegisteredError) as exc_info:
            await dispatcher.send(GetAllProducts())

        assert "GetAllProducts" in str(exc_info.value)

    def test_build_dispatcher_registers_every_request(self, mock_repository):
        """Test: 기본 구성은 모든 요청 타입을 등록"""
        dispatcher = build_dispatcher(mock_repository)

        for request_type in (
            CreateProduct,
            DeleteProduct,
            GetAllProducts,
            GetProductById,
            UpdateProduct,
        ):
            assert dispatcher.handler_for(request_type) is not None

        with pytest.raises(ConfigurationError):
            dispatcher.register(CreateProduct, make_handler())


class TestSend:
    """Test: 요청 디스패치 테스트"""

    @pytest.mark.asyncio
    async def test_returns_handler_result_unchanged(self):
        """Test: 핸들러 결과를 그대로 반환"""
        expected = Result.failure("Product with ID 3 not found.")
        handler = make_handler(expected)
        dispatcher = Dispatcher()
        dispatcher.register(GetProductById, handler)

        result = await dispatcher.send(GetProductById(id=3))

        assert result is expected
        handler.handle.assert_awaited_once_with(GetProductById(id=3), None)

    @pytest.mark.asyncio
    async def test_passes_cancel_event_to_handler(self):
        """Test: 취소 신호를 핸들러에 전달"""
        cancel_event = asyncio.Event()
        handler = make_handler(Result.success(None))
        dispatcher = Dispatcher()
        dispatcher.register(DeleteProduct, handler)

        await dispatcher.send(DeleteProduct(id=1), cancel_event)

        handler.handle.assert_awaited_once_with(DeleteProduct(id=1), cancel_event)

    @pytest.mark.asyncio
    async def test_invalid_request_never_reaches_handler(self):
        """Test: 검증 실패 시 핸들러 호출 횟수 0"""
        handler = make_handler(1)
        dispatcher = Dispatcher()
        dispatcher.register(CreateProduct, handler)

        result = await dispatcher.send(CreateProduct(name="", price=Decimal("0")))

        assert handler.handle.await_count == 0
        assert result.is_success is False
        assert result.is_invalid is True
        assert result.error == "Name is required."
        assert [v.message for v in result.violations] == [
            "Name is required.",
            "Price must be greater than 0.",
        ]

    @pytest.mark.asyncio
    async def test_valid_request_reaches_handler(self):
        """Test: 유효한 요청은 핸들러까지 전달"""
        handler = make_handler(42)
        dispatcher = Dispatcher()
        dispatcher.register(CreateProduct, handler)

        product_id = await dispatcher.send(
            CreateProduct(name="Test Product", price=Decimal("19.99"))
        )

        assert product_id == 42
        handler.handle.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_behaviors_run_in_order(self):
        """Test: 파이프라인 동작은 등록 순서대로 실행"""
        calls = []

        def recording(name):
            async def behavior(request, call_next):
                calls.append(f"{name}:before")
                response = await call_next()
                calls.append(f"{name}:after")
                return response

            return behavior

        handler = make_handler([])
        dispatcher = Dispatcher(behaviors=[recording("outer"), recording("inner")])
        dispatcher.register(GetAllProducts, handler)

        await dispatcher.send(GetAllProducts())

        assert calls == ["outer:before", "inner:before", "inner:after", "outer:after"]

    @pytest.mark.asyncio
    async def test_without_behaviors_skips_validation(self):
        """Test: 동작 목록이 비어 있으면 검증 없이 핸들러 실행"""
        handler = make_handler(7)
        dispatcher = Dispatcher(behaviors=[])
        dispatcher.register(CreateProduct, handler)

        result = await dispatcher.send(CreateProduct(name="", price=Decimal("0")))

        assert result == 7


class TestBehaviors:
    """Test: 개별 파이프라인 동작 테스트"""

    @pytest.mark.asyncio
    async def test_validation_behavior_short_circuits(self):
        """Test: 검증 실패 시 call_next를 호출하지 않음"""
        call_next = AsyncMock(return_value=1)

        result = await validation_behavior(DeleteProduct(id=0), call_next)

        call_next.assert_not_awaited()
        assert result.error == "Id must be greater than 0."

    @pytest.mark.asyncio
    async def test_logging_behavior_logs_failures(self, caplog):
        """Test: 실패 결과를 INFO 레벨로 기록"""
        call_next = AsyncMock(return_value=Result.failure("Product with ID 9 not found."))

        with caplog.at_level("INFO", logger="catalog.application.behaviors"):
            result = await logging_behavior(GetProductById(id=9), call_next)

        assert result.error == "Product with ID 9 not found."
        assert "GetProductById failed" in caplog.text
