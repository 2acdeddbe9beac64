"""Tests for the item listing job."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from artifactcards.jobs.list_items import main, parse_args, run_list_items
from artifactcards.models import Card, DecodeError
from artifactcards.services.card_filter import FindItemsParams
from artifactcards.services.card_set_api import CardSetApi
from tests.factories import card_payload


@pytest.fixture
def card_set_api() -> MagicMock:
    api = MagicMock(spec=CardSetApi)
    api.set_ids = ("00", "01")
    api.get_all_cards.return_value = [
        Card.model_validate(card_payload(1, gold_cost=3, name="Blink Dagger")),
        Card.model_validate(card_payload(2, gold_cost=2, name="Leather Armor")),
        Card.model_validate(card_payload(3, card_type="Creep", name="Melee Creep")),
    ]
    return api


class TestRunListItems:
    def test_lists_item_info(self, card_set_api: MagicMock) -> None:
        """Matching items are described by name and gold."""
        lines = run_list_items(FindItemsParams(gold_cost=3), card_set_api)

        assert lines == ["Name: Blink Dagger / Gold: 3"]

    def test_include_adjacent(self, card_set_api: MagicMock) -> None:
        """Adjacent search lists the cheaper item too."""
        lines = run_list_items(FindItemsParams(gold_cost=3, include_adjacent=True), card_set_api)

        assert lines == ["Name: Blink Dagger / Gold: 3", "Name: Leather Armor / Gold: 2"]

    def test_logs_items(self, card_set_api: MagicMock, caplog: pytest.LogCaptureFixture) -> None:
        """Each item line is logged."""
        with caplog.at_level(logging.INFO, logger="artifactcards.jobs.list_items"):
            run_list_items(FindItemsParams(gold_cost=3), card_set_api)

        assert "Name: Blink Dagger / Gold: 3" in caplog.messages

    def test_logs_names_with_percent_signs(
        self, card_set_api: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Card names are logged verbatim, never used as format strings."""
        card_set_api.get_all_cards.return_value = [
            Card.model_validate(card_payload(1, gold_cost=3, name="100%s Dagger")),
        ]

        with caplog.at_level(logging.INFO, logger="artifactcards.jobs.list_items"):
            run_list_items(FindItemsParams(gold_cost=3), card_set_api)

        record = next(r for r in caplog.records if "Dagger" in r.getMessage())
        assert record.msg == "%s"
        assert record.getMessage() == "Name: 100%s Dagger / Gold: 3"

    def test_propagates_fetch_errors(self, card_set_api: MagicMock) -> None:
        """Card set failures are not swallowed."""
        card_set_api.get_all_cards.side_effect = DecodeError("bad json", set_id="00")

        with pytest.raises(DecodeError):
            run_list_items(FindItemsParams(gold_cost=3), card_set_api)


class TestParseArgs:
    def test_parses_gold_cost(self) -> None:
        assert parse_args(["--gold-cost", "4"]) == FindItemsParams(gold_cost=4)

    def test_parses_include_adjacent(self) -> None:
        params = parse_args(["--gold-cost", "4", "--include-adjacent"])

        assert params == FindItemsParams(gold_cost=4, include_adjacent=True)

    def test_gold_cost_required(self) -> None:
        with pytest.raises(SystemExit):
            parse_args([])


class TestMain:
    def test_returns_zero_on_success(self, card_set_api: MagicMock) -> None:
        """Successful runs exit 0."""
        card_set_api.__enter__.return_value = card_set_api
        card_set_api.__exit__.return_value = False

        with patch("artifactcards.jobs.list_items.CardSetApi", return_value=card_set_api):
            assert main(["--gold-cost", "3"]) == 0

    def test_returns_one_on_failure(self, card_set_api: MagicMock) -> None:
        """Card set failures exit 1."""
        card_set_api.__enter__.return_value = card_set_api
        card_set_api.__exit__.return_value = False
        card_set_api.get_all_cards.side_effect = DecodeError("bad json", set_id="00")

        with patch("artifactcards.jobs.list_items.CardSetApi", return_value=card_set_api):
            assert main(["--gold-cost", "3"]) == 1
