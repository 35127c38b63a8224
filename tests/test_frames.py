from __future__ import annotations

import pandas as pd
import pytest

from maphelpers import InvalidArgument, format_mapping
from maphelpers.data import mapping_from_frame, mapping_to_frame, normalize_pairs_frame, pairs_from_frame


def _sample_pairs_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            " key ": ["alpha", "  beta ", " ", None, "alpha"],
            "val": [1, 2, 3, 4, 5],
            "notes": ["x", "y", "z", "w", "v"],
        }
    )


def test_normalize_pairs_frame_resolves_aliases_and_drops_blank_keys():
    out = normalize_pairs_frame(_sample_pairs_frame())
    assert out.columns.tolist() == ["Key", "Value"]
    assert out["Key"].tolist() == ["alpha", "beta", "alpha"]
    assert out["Value"].tolist() == [1, 2, 5]


def test_normalize_pairs_frame_requires_both_columns():
    with pytest.raises(InvalidArgument, match="Value"):
        normalize_pairs_frame(pd.DataFrame({"Key": ["a"]}))

    with pytest.raises(InvalidArgument):
        normalize_pairs_frame(None)  # type: ignore[arg-type]


def test_pairs_from_frame_preserves_row_order():
    pairs = pairs_from_frame(_sample_pairs_frame())
    assert pairs == [("alpha", 1), ("beta", 2), ("alpha", 5)]


def test_mapping_from_frame_later_rows_win_and_reuse_target():
    target = {"gamma": 0}
    result = mapping_from_frame(_sample_pairs_frame(), target)
    assert result is target
    assert target == {"gamma": 0, "alpha": 5, "beta": 2}

    fresh = mapping_from_frame(pd.DataFrame({"name": ["a", "b"], "value": ["x", "y"]}), {})
    assert fresh == {"a": "x", "b": "y"}


def test_mapping_from_frame_custom_columns():
    df = pd.DataFrame({"Setting": ["timeout", "retries"], "Amount": [30, 3]})
    assert mapping_from_frame(df, {}, key_col="Setting", value_col="Amount") == {"timeout": 30, "retries": 3}


def test_mapping_to_frame_round_trips_through_formatting():
    data = {"b": 2, "a": [1, 2]}
    frame = mapping_to_frame(data)
    assert frame.columns.tolist() == ["Key", "Value"]
    assert frame["Key"].tolist() == ["b", "a"]
    assert frame["Value"].tolist() == [2, [1, 2]]

    rebuilt = mapping_from_frame(frame, {})
    assert format_mapping(rebuilt, "", None, "%s=%s;", None, "") == "b=2;a=[1, 2];"


def test_mapping_to_frame_empty_mapping():
    frame = mapping_to_frame({})
    assert frame.empty
    assert frame.columns.tolist() == ["Key", "Value"]


def test_mapping_from_frame_requires_target_mapping():
    with pytest.raises(TypeError):
        mapping_from_frame(_sample_pairs_frame())  # type: ignore[call-arg]
