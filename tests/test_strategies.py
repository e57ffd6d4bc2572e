"""Tests for layout strategies and start offsets."""

from __future__ import annotations

import pytest

from platelayout.strategies import (
    LayoutStrategy,
    UnknownStrategy,
    build_layout,
    cdc_primer_layout,
    cdc_sample_layout,
    list_strategies,
    make_start_offsets,
    primer_layout,
    sample_layout,
)


class TestStartOffsets:
    """Row at which each group's block begins."""

    @pytest.mark.parametrize(
        ("rows", "group_size", "expected"),
        [
            (8, 4, [0, 4]),
            (8, 2, [0, 2, 4, 6]),
            (8, 8, [0]),
            (8, 3, [0, 3, 6]),
            (5, 10, [0]),
            (1, 1, [0]),
        ],
    )
    def test_offsets(self, rows, group_size, expected):
        assert make_start_offsets(rows, group_size) == expected

    def test_group_size_one_gives_every_row(self):
        assert make_start_offsets(8, 1) == list(range(8))

    def test_non_positive_group_size_rejected(self):
        with pytest.raises(ValueError):
            make_start_offsets(8, 0)


class TestSampleLayout:
    def test_order_blocks_then_columns_then_replicates(self):
        lyt = sample_layout(4, 2, 2, [0, 2])
        assert lyt == [(0, 0), (1, 0), (0, 1), (1, 1),
                       (2, 0), (3, 0), (2, 1), (3, 1)]

    def test_overrunning_block_is_clipped(self):
        lyt = sample_layout(3, 1, 2, make_start_offsets(3, 2))
        assert lyt == [(0, 0), (1, 0), (2, 0)]


class TestPrimerLayout:
    def test_order_replicates_then_blocks_then_columns(self):
        lyt = primer_layout(4, 2, 2, [0, 2])
        assert lyt == [(0, 0), (0, 1), (2, 0), (2, 1),
                       (1, 0), (1, 1), (3, 0), (3, 1)]

    def test_same_wells_as_sample_layout(self):
        offsets = make_start_offsets(8, 4)
        assert sorted(primer_layout(8, 12, 4, offsets)) == sorted(sample_layout(8, 12, 4, offsets))


class TestPlateCoverage:
    """Sample and primer layouts visit every well of the plate exactly once."""

    @pytest.mark.parametrize("func", [sample_layout, primer_layout])
    @pytest.mark.parametrize(
        ("rows", "columns", "group_size"),
        [(8, 12, 1), (8, 12, 2), (8, 12, 4), (8, 12, 8), (16, 24, 4),
         (8, 12, 3), (8, 12, 5), (1, 1, 1), (3, 7, 2)],
    )
    def test_each_well_once(self, func, rows, columns, group_size):
        lyt = func(rows, columns, group_size, make_start_offsets(rows, group_size))
        assert len(lyt) == rows * columns
        assert set(lyt) == {(r, c) for r in range(rows) for c in range(columns)}


class TestCdcLayouts:
    def test_cdc_sample_ignores_dimensions(self):
        lyt = cdc_sample_layout(2, 3, 4, [0])
        assert len(lyt) == 96
        assert lyt[:5] == [(0, 0), (1, 0), (2, 0), (3, 0), (0, 1)]
        assert lyt[48] == (4, 0)

    def test_cdc_sample_partial_blocks(self):
        lyt = cdc_sample_layout(8, 12, 2, [0, 2, 4, 6])
        assert len(lyt) == 48
        assert lyt[:4] == [(0, 0), (1, 0), (0, 1), (1, 1)]
        assert lyt[24:26] == [(4, 0), (5, 0)]

    def test_cdc_primer_always_three_rows(self):
        for group_size in (1, 3, 4):
            lyt = cdc_primer_layout(8, 12, group_size, [0, 4])
            assert len(lyt) == 72
            assert lyt[:12] == [(0, c) for c in range(12)]
            assert lyt[12] == (4, 0)
            assert lyt[24] == (1, 0)
            assert len(set(lyt)) == 72

    def test_cdc_sample_rejects_overlapping_groups(self):
        with pytest.raises(ValueError, match="up to 4"):
            build_layout(LayoutStrategy.CDC_SAMPLE_LAYOUT, 8, 12, 5, [0, 5])


class TestLayoutStrategy:
    @pytest.mark.parametrize(
        "value",
        ["PrimerLayout", "primer_layout", "PRIMER_LAYOUT", LayoutStrategy.PRIMER_LAYOUT],
    )
    def test_parse_aliases(self, value):
        assert LayoutStrategy.parse(value) is LayoutStrategy.PRIMER_LAYOUT

    def test_parse_none_is_sample_layout(self):
        assert LayoutStrategy.parse(None) is LayoutStrategy.SAMPLE_LAYOUT

    def test_unknown_name(self):
        with pytest.raises(UnknownStrategy) as exc_info:
            LayoutStrategy.parse("bogus")
        assert exc_info.value.strategy == "bogus"
        assert "SampleLayout" in exc_info.value.available
        assert "bogus" in str(exc_info.value)

    def test_unknown_type(self):
        with pytest.raises(UnknownStrategy):
            LayoutStrategy.parse(42)

    def test_unknown_strategy_is_value_error(self):
        assert issubclass(UnknownStrategy, ValueError)

    def test_list_strategies(self):
        names = [s["name"] for s in list_strategies()]
        assert names == ["SampleLayout", "PrimerLayout", "CdcSampleLayout", "CdcPrimerLayout"]
        cdc_primer = list_strategies()[3]
        assert cdc_primer["fixed_group_size"] == 3
        assert cdc_primer["alias"] == "cdc_primer_layout"
