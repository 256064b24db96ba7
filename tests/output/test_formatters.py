"""Tests for output formatting across JSON, quiet, and Rich modes."""

import json

from pastelaria.output.console import create_console, get_output, style_for_state
from pastelaria.output.formatters import OutputSettings, format_result
from pastelaria.services.result import ServiceResult

_PRODUCT = {
    "id": 3,
    "name": "Beef Pastel",
    "price": "19.99",
    "product_type_id": 1,
    "photo": None,
    "created_at": "2024-01-01T00:00:00+00:00",
    "updated_at": "2024-01-01T00:00:00+00:00",
    "deleted_at": None,
    "state": "active",
}


def _listing(*items: dict[str, object]) -> ServiceResult:
    return ServiceResult(
        ok=True, op="list_products", data={"items": list(items), "count": len(items)}
    )


class TestJsonMode:
    def test_full_result(self) -> None:
        result = ServiceResult(ok=True, op="show_product", data=_PRODUCT)
        parsed = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert parsed["ok"] is True
        assert parsed["data"]["price"] == "19.99"

    def test_json_wins_over_quiet(self) -> None:
        result = ServiceResult(ok=True, op="show_product", data=_PRODUCT)
        out = format_result(result, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(out)["op"] == "show_product"


class TestQuietMode:
    def test_listing_prints_ids(self) -> None:
        out = format_result(
            _listing(_PRODUCT, {**_PRODUCT, "id": 4}), settings=OutputSettings(quiet=True)
        )
        assert out == "3\n4"

    def test_mutation(self) -> None:
        result = ServiceResult(ok=True, op="delete_product", data={"id": 3})
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: delete_product"

    def test_error(self) -> None:
        result = ServiceResult.failure("show_product", "NOT_FOUND", "No active product found")
        out = format_result(result, settings=OutputSettings(quiet=True))
        assert out.startswith("ERROR: show_product")
        assert "No active product found" in out


class TestRichMode:
    def test_record_fields(self) -> None:
        out = format_result(ServiceResult(ok=True, op="show_product", data=_PRODUCT))
        assert "OK" in out
        assert "show_product" in out
        assert "name: Beef Pastel" in out
        assert "price: 19.99" in out
        assert "created_at" not in out
        assert "photo" not in out

    def test_verbose_shows_timestamps(self) -> None:
        result = ServiceResult(ok=True, op="show_product", data=_PRODUCT)
        out = format_result(result, settings=OutputSettings(verbose=True))
        assert "created_at" in out

    def test_table(self) -> None:
        out = format_result(_listing(_PRODUCT))
        assert "Beef Pastel" in out
        assert "Price" in out
        assert "1 records" in out

    def test_empty_listing(self) -> None:
        assert format_result(_listing()) == "No records."

    def test_error_detail_when_verbose(self) -> None:
        result = ServiceResult.failure("show_product", "NOT_FOUND", "gone", id=3)
        out = format_result(result, settings=OutputSettings(verbose=True))
        assert "ERROR" in out
        assert "gone" in out
        assert "status: 404" in out


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_state_styles(self) -> None:
        assert style_for_state("active") == "pastel.state.active"
        assert style_for_state("soft_deleted") == "pastel.state.soft_deleted"
        assert style_for_state("other") == ""
