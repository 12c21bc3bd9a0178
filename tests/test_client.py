"""
Tests for client.py
"""
from unittest.mock import MagicMock

import pytest

from tosspayments import TossPayments
from tosspayments.exceptions import InvalidCredentialError
from tosspayments.requester.base import Requester
from tosspayments.requester.httpx_requester import HttpxRequester

from tests.conftest import TEST_SECRET_KEY


class TestTossPayments:
    def test_endpoint(self):
        assert TossPayments.ENDPOINT == "https://api.tosspayments.com/v1/inform"

    @pytest.mark.parametrize("secret_key", [None, ""])
    def test_invalid_secret_key(self, secret_key):
        with pytest.raises(InvalidCredentialError):
            TossPayments(secret_key)

    def test_invalid_secret_key_with_custom_requester(self):
        with pytest.raises(InvalidCredentialError):
            TossPayments("", MagicMock(spec=Requester))

    def test_default_requester(self):
        with TossPayments(TEST_SECRET_KEY) as toss:
            assert isinstance(toss.requester, HttpxRequester)
            assert toss.requester.endpoint == TossPayments.ENDPOINT

    def test_custom_requester(self):
        custom = MagicMock(spec=Requester)

        toss = TossPayments(TEST_SECRET_KEY, custom)

        assert toss.requester is custom

    def test_close_without_close_method(self):
        custom = MagicMock(spec=Requester)

        TossPayments(TEST_SECRET_KEY, custom).close()

    def test_close_delegates(self):
        custom = MagicMock(spec=HttpxRequester)

        TossPayments(TEST_SECRET_KEY, custom).close()

        custom.close.assert_called_once()
