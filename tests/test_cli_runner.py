# tests/test_cli_runner.py

"""Tests for the headless CLI commands."""

import io
import json
import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from fakestore.cli.runner import cli_get, cli_list, parse_query_item
from fakestore.models.product import Product
from fakestore.network.errors import BadUrl, InvalidResponse
from fakestore.network.resource import Get

PRODUCT = Product(
    id=1,
    title="Fjallraven Backpack",
    price=109.95,
    description="Your perfect pack for everyday use",
    category="men's clothing",
    image="https://fakestoreapi.com/img/81fPKd-2AYL.jpg",
)


def _service(
    result: object = None, error: Exception | None = None
) -> MagicMock:
    service = MagicMock()
    service.load = AsyncMock(return_value=result, side_effect=error)
    return service


class TestParseQueryItem(unittest.TestCase):
    """key=value parsing for -q arguments."""

    def test_simple_pair(self) -> None:
        """key=value splits on the first equals sign."""
        self.assertEqual(parse_query_item("limit=5"), ("limit", "5"))

    def test_value_may_contain_equals(self) -> None:
        """Later equals signs stay in the value."""
        self.assertEqual(parse_query_item("q=a=b"), ("q", "a=b"))

    def test_empty_value_allowed(self) -> None:
        """key= gives an empty value."""
        self.assertEqual(parse_query_item("sort="), ("sort", ""))

    def test_missing_separator_rejected(self) -> None:
        """An item without = is rejected."""
        with self.assertRaises(ValueError):
            parse_query_item("limit")

    def test_empty_key_rejected(self) -> None:
        """An item without a key is rejected."""
        with self.assertRaises(ValueError):
            parse_query_item("=5")


@patch("fakestore.cli.runner._err")
class TestCliList(unittest.IsolatedAsyncioTestCase):
    """cli_list exit codes and output."""

    async def test_json_output(self, _mock_err: MagicMock) -> None:
        """JSON output holds the decoded products as wire objects."""
        service = _service([PRODUCT])
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = await cli_list([("limit", "1")], "json", service)

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out.getvalue()), [PRODUCT.to_dict()])
        resource = service.load.await_args.args[0]
        self.assertEqual(resource.method, Get((("limit", "1"),)))

    @patch("fakestore.cli.runner.Console")
    async def test_table_output(
        self, mock_console_cls: MagicMock, _mock_err: MagicMock,
    ) -> None:
        """Table output is rendered through a Rich console."""
        code = await cli_list([], "table", _service([PRODUCT]))

        self.assertEqual(code, 0)
        mock_console_cls.return_value.print.assert_called_once()

    async def test_empty_result_succeeds(self, mock_err: MagicMock) -> None:
        """An empty 200 list is a success and prints []."""
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = await cli_list([("limit", "0")], "json", _service([]))

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out.getvalue()), [])
        self.assertIn("No products found", mock_err.print.call_args.args[0])

    @patch("fakestore.cli.runner.Console")
    async def test_empty_result_table(
        self, mock_console_cls: MagicMock, _mock_err: MagicMock,
    ) -> None:
        """An empty list still renders an (empty) table."""
        self.assertEqual(await cli_list([], "table", _service([])), 0)
        mock_console_cls.return_value.print.assert_called_once()

    async def test_network_error_fails(self, mock_err: MagicMock) -> None:
        """A NetworkError exits 1 and shows its description."""
        code = await cli_list([], "json", _service(error=BadUrl()))

        self.assertEqual(code, 1)
        printed = mock_err.print.call_args.args[0]
        self.assertIn("Bad Url found", printed)

    @patch("fakestore.cli.runner.ProductEndpoints")
    async def test_missing_url_fails(
        self, mock_endpoints: MagicMock, _mock_err: MagicMock,
    ) -> None:
        """No URL means no request and exit code 1."""
        mock_endpoints.all_products.return_value = None
        service = _service([PRODUCT])

        self.assertEqual(await cli_list([], "json", service), 1)
        service.load.assert_not_awaited()


@patch("fakestore.cli.runner._err")
class TestCliGet(unittest.IsolatedAsyncioTestCase):
    """cli_get exit codes and output."""

    async def test_json_output(self, _mock_err: MagicMock) -> None:
        """JSON output holds the decoded products as wire objects."""
        service = _service(PRODUCT)
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = await cli_get(1, "json", service)

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out.getvalue()), [PRODUCT.to_dict()])
        resource = service.load.await_args.args[0]
        self.assertEqual(resource.url, "https://fakestoreapi.com/products/1")

    async def test_invalid_response_fails(
        self, mock_err: MagicMock,
    ) -> None:
        """InvalidResponse exits 1 and shows the server message."""
        code = await cli_get(1, "json", _service(error=InvalidResponse("nope")))

        self.assertEqual(code, 1)
        self.assertIn("nope", mock_err.print.call_args.args[0])


if __name__ == "__main__":
    unittest.main()
