from __future__ import annotations

from dataclasses import replace

import pytest

from producer_catalog import (
    DEFAULT_PRODUCERS,
    PRODUCERS,
    ProducerDefinition,
    producer_catalog,
    validate_producer_catalog,
)


def test_default_catalog_order_and_ids():
    assert [p.key for p in PRODUCERS] == [
        "mana_crystal",
        "arcane_tower",
        "ley_line_node",
        "elder_artifact",
    ]


def test_default_growth_factors():
    assert [p.growth_factor for p in PRODUCERS] == [1.15, 1.2, 1.2, 1.2]


def test_runtime_catalog_preserves_order():
    catalog = producer_catalog()

    assert list(catalog) == [p.key for p in DEFAULT_PRODUCERS]
    assert catalog["mana_crystal"]["start_level"] == 5
    assert catalog["elder_artifact"]["anchor"] == "bottom_right"


def test_validate_rejects_wrong_size():
    with pytest.raises(ValueError, match="expected 4 producers"):
        validate_producer_catalog(DEFAULT_PRODUCERS[:3])


def test_validate_rejects_duplicate_ids():
    entries = list(DEFAULT_PRODUCERS)
    entries[1] = replace(entries[1], key="mana_crystal")

    with pytest.raises(ValueError, match="unique"):
        validate_producer_catalog(entries)


def test_validate_rejects_duplicate_anchors():
    entries = list(DEFAULT_PRODUCERS)
    entries[3] = replace(entries[3], anchor="top_left")

    with pytest.raises(ValueError, match="anchor"):
        validate_producer_catalog(entries)


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"key": "Bad Id"}, "invalid producer id"),
        ({"display_name": "  "}, "display name"),
        ({"base_cost": 0}, "base cost"),
        ({"base_cost": float("inf")}, "base cost"),
        ({"speed_per_level": -0.1}, "speed per level"),
        ({"growth_factor": 0.9}, "growth factor"),
        ({"start_level": 101}, "start level"),
        ({"start_level": True}, "start level"),
        ({"anchor": "center"}, "unknown anchor"),
    ],
)
def test_validate_rejects_bad_definition(changes, message):
    entries = list(DEFAULT_PRODUCERS)
    entries[2] = replace(entries[2], **changes)

    with pytest.raises(ValueError, match=message):
        validate_producer_catalog(entries)


def test_validate_accepts_custom_catalog():
    custom = [
        ProducerDefinition(f"p{i}", f"P{i}", "", 1.0 + i, 0.5, 1.0, anchor=anchor)
        for i, anchor in enumerate(["top_left", "top_right", "bottom_left", "bottom_right"])
    ]

    assert [p.key for p in validate_producer_catalog(custom)] == ["p0", "p1", "p2", "p3"]
