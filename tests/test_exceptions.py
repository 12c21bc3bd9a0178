from tosspayments.exceptions import (
    DeserializationError,
    InvalidCredentialError,
    RequestExecutionError,
    SerializationError,
    TossApiException,
    TossPaymentsError,
)


class TestTossApiException:
    def test_message_and_status(self):
        error = TossApiException(400)
        assert str(error) == "Toss Api http request failed 400"
        assert error.status_code == 400
        assert error.response_body is None

    def test_response_body(self):
        error = TossApiException(404, '{"code":"NOT_FOUND_PAYMENT"}')
        assert error.response_body == '{"code":"NOT_FOUND_PAYMENT"}'

    def test_repr(self):
        assert repr(TossApiException(500)) == "TossApiException(status_code=500)"


class TestRequestExecutionError:
    def test_cause(self):
        cause = ConnectionRefusedError()
        error = RequestExecutionError("HTTP request failed", cause)
        assert error.cause is cause
        assert str(error) == "HTTP request failed"

    def test_without_cause(self):
        assert RequestExecutionError("failed").cause is None


class TestHierarchy:
    def test_all_derive_from_base(self):
        for cls in (
            InvalidCredentialError,
            TossApiException,
            RequestExecutionError,
            SerializationError,
            DeserializationError,
        ):
            assert issubclass(cls, TossPaymentsError)

    def test_invalid_credential_is_value_error(self):
        assert issubclass(InvalidCredentialError, ValueError)

    def test_codes(self):
        assert TossApiException.code == "TOSS_API_ERROR"
        assert RequestExecutionError.code == "REQUEST_EXECUTION_ERROR"
