"""
커스텀 예외 정의

애플리케이션 전역에서 사용되는 커스텀 예외 클래스들입니다.
검증 실패와 상품 미존재는 예외가 아닌 Result로 전달되며,
여기에는 요청 단위로 복구할 수 없는 오류만 정의합니다.
"""


class ConfigurationError(Exception):
    """
    잘못된 구성으로 인해 애플리케이션을 시작할 수 없을 때 발생하는 예외

    기동 시점(또는 최초 사용 시점)에 치명적이며 요청 단위로 처리하지 않습니다.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class HandlerNotRegisteredError(ConfigurationError):
    """
    요청 타입에 대응하는 핸들러가 등록되지 않았을 때 발생하는 예외
    """

    def __init__(self, request_type: type):
        self.request_type = request_type
        super().__init__(f"No handler registered for request type '{request_type.__name__}'")


class HandlerAlreadyRegisteredError(ConfigurationError):
    """
    같은 요청 타입에 핸들러를 두 번 등록하려 할 때 발생하는 예외
    """

    def __init__(self, request_type: type):
        self.request_type = request_type
        super().__init__(
            f"Handler for request type '{request_type.__name__}' is already registered"
        )


class RepositoryError(Exception):
    """
    저장소(DB) 연결 실패 또는 쿼리 실패 시 발생하는 예외

    HTTP Status Code: 500 Internal Server Error
    (내부 오류 내용은 응답에 노출하지 않습니다)
    """

    def __init__(self, operation: str, message: str = "Repository operation failed"):
        self.operation = operation
        self.message = f"{message}: {operation}"
        super().__init__(self.message)
