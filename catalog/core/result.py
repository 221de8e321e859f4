"""
Result 타입

예상 가능한 실패(검증 실패, 상품 없음)를 예외 대신 반환값으로 전달합니다.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Violation:
    """
    검증 규칙 위반 항목

    Attributes:
        field: 규칙을 위반한 필드명
        message: 사용자에게 노출되는 메시지
    """

    field: str
    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    성공/실패를 구분하는 결과 래퍼

    success(), failure(), invalid() 팩토리로만 생성합니다.
    성공이면 error가 None이고, 실패이면 value가 None입니다.

    Example:
        >>> Result.success(3).value
        3
        >>> Result.failure("Product with ID 7 not found.").is_success
        False
    """

    is_success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    violations: tuple[Violation, ...] = ()

    def __post_init__(self) -> None:
        if self.is_success and (self.error is not None or self.violations):
            raise ValueError("A successful result cannot carry an error")
        if not self.is_success:
            if self.error is None:
                raise ValueError("A failed result must carry an error message")
            if self.value is not None:
                raise ValueError("A failed result cannot carry a value")

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        """값을 담은 성공 결과를 생성합니다."""
        return cls(is_success=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "Result[T]":
        """에러 메시지를 담은 실패 결과를 생성합니다."""
        return cls(is_success=False, error=error)

    @classmethod
    def invalid(cls, violations: list[Violation]) -> "Result[T]":
        """
        검증 실패 결과를 생성합니다.

        error에는 첫 번째 위반 메시지가 들어가고,
        전체 위반 목록은 violations에 보존됩니다.

        Raises:
            ValueError: 위반 목록이 비어 있는 경우
        """
        if not violations:
            raise ValueError("An invalid result needs at least one violation")
        return cls(
            is_success=False,
            error=violations[0].message,
            violations=tuple(violations),
        )

    @property
    def is_invalid(self) -> bool:
        """검증 단계에서 거부된 결과인지 여부"""
        return bool(self.violations)

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용 dict 표현"""
        if self.is_success:
            return {"is_success": True, "value": self.value}
        data: dict[str, Any] = {"is_success": False, "error": self.error}
        if self.violations:
            data["violations"] = [
                {"field": v.field, "message": v.message} for v in self.violations
            ]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Result[Any]":
        """
        to_dict()의 출력으로부터 Result를 복원합니다.

        violations 키가 있으면 검증 실패, 없으면 일반 실패로 복원합니다.

        Raises:
            ValueError: is_success 키가 없거나 실패 결과에 error가 없는 경우
        """
        if "is_success" not in data:
            raise ValueError("Serialized result must contain 'is_success'")

        if data["is_success"]:
            return cls.success(data.get("value"))

        if data.get("violations"):
            return cls.invalid(
                [Violation(v["field"], v["message"]) for v in data["violations"]]
            )

        if data.get("error") is None:
            raise ValueError("A failed result must carry an error message")
        return cls.failure(data["error"])

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.success({self.value!r})"
        if self.violations:
            return f"Result.invalid({list(self.violations)!r})"
        return f"Result.failure({self.error!r})"
