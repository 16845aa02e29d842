"""
输出格式化测试
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal

from fa_query.services.dispatcher import get_dispatcher
from fa_query.utils.output import dump_json, format_action_list


def test_dump_json_pretty_prints() -> None:
    text = dump_json({"owner": "Acme Air"})

    assert text == '{\n    "owner": "Acme Air"\n}'


def test_dump_json_handles_zeep_value_types() -> None:
    text = dump_json(
        {"wingspan": Decimal("35.8"), "filed": datetime(2020, 1, 2, 3, 4, 5)},
        indent=0,
    )

    assert json.loads(text) == {"wingspan": "35.8", "filed": "2020-01-02T03:04:05"}


def test_dump_json_keeps_unicode() -> None:
    assert "Zürich" in dump_json({"city": "Zürich"})


def test_format_action_list() -> None:
    text = format_action_list(get_dispatcher().list_actions())
    lines = text.splitlines()

    assert lines[0] == "Available Actions:"
    assert len(lines) == 4
    assert lines[1] == "\taircraft-type https://flightxml.flightaware.com/soap/FlightXML2/doc#op_AircraftType"
    assert lines[3].startswith("\tairline-flight-info ")
