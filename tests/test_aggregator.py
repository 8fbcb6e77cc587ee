"""Tests for volume aggregation."""

import pytest
from earthwork_report.aggregation.aggregator import VolumeAggregator
from earthwork_report.host.json_document import JsonDocument, JsonItemRecord, JsonMaterialRecord


def make_quantity(start, end, cut, fill):
    return {"station_start": start, "station_end": end, "cut_volume": cut, "fill_volume": fill}


def make_lists(*lists):
    """Material list records from (name, [(item name, [quantity, ...]), ...]) tuples."""
    raw_lists = []
    for list_index, (list_name, items) in enumerate(lists):
        raw_lists.append({
            "id": f"ML-{list_index}",
            "name": list_name,
            "alignment_id": "AL-1",
            "items": [
                {"id": f"ML-{list_index}/IT-{item_index}", "name": item_name, "quantities": quantities}
                for item_index, (item_name, quantities) in enumerate(items)
            ],
        })
    return list(JsonDocument({"material_lists": raw_lists}).list_material_lists())


class UnnamedItemRecord(JsonItemRecord):
    """Item whose name cannot be read from the host."""

    @property
    def name(self):
        raise RuntimeError("item name unreadable")


class UnnamedMaterialRecord(JsonMaterialRecord):
    """Material list whose name cannot be read from the host."""

    @property
    def name(self):
        raise RuntimeError("list name unreadable")


class ListWithUnnamedItem(JsonMaterialRecord):
    """Material list whose first item cannot be named."""

    def read_items(self):
        items = super().read_items()
        return [UnnamedItemRecord(self._raw["items"][0], items[0].record_id)] + items[1:]


class TestVolumeAggregator:
    """Test suite for VolumeAggregator class."""

    @pytest.fixture
    def aggregator(self):
        """Fixture to provide VolumeAggregator instance."""
        return VolumeAggregator()

    def test_cumulative_and_net(self, aggregator):
        """Test running totals and net volume on the two-row example."""
        material_lists = make_lists(("Earthworks", [("Topsoil", [
            make_quantity(0, 20, 10, 4),
            make_quantity(20, 40, 5, 6),
        ])]))

        table = aggregator.aggregate(material_lists)

        assert [r.cumulative_cut for r in table.rows] == [10.0, 15.0]
        assert [r.cumulative_fill for r in table.rows] == [4.0, 10.0]
        assert [r.net_volume for r in table.rows] == [6.0, -1.0]
        assert table.total_cut == 15.0
        assert table.total_fill == 10.0
        assert table.net_total == 5.0

    def test_cumulative_runs_across_lists(self, aggregator):
        """Test that totals are not reset per material list or item."""
        material_lists = make_lists(
            ("List A", [("Topsoil", [make_quantity(0, 10, 1.5, 0.5)]),
                        ("Rock", [make_quantity(0, 10, 2.0, 1.0)])]),
            ("List B", [("Clay", [make_quantity(0, 10, 3.0, 4.0),
                                  make_quantity(10, 20, 0.25, 0.0)])]),
        )

        table = aggregator.aggregate(material_lists)

        cuts = [r.cut_volume for r in table.rows]
        fills = [r.fill_volume for r in table.rows]
        for i, row in enumerate(table.rows):
            assert row.cumulative_cut == sum(cuts[:i + 1])
            assert row.cumulative_fill == sum(fills[:i + 1])
            assert row.net_volume == row.cut_volume - row.fill_volume

        assert table.total_cut == table.rows[-1].cumulative_cut
        assert table.total_fill == table.rows[-1].cumulative_fill

    def test_row_order_follows_traversal(self, aggregator):
        """Test list, then item, then quantity order with no sorting."""
        material_lists = make_lists(
            ("Zulu", [("Rock", [make_quantity(30, 40, 1, 0), make_quantity(0, 10, 1, 0)]),
                      ("Clay", [make_quantity(20, 30, 1, 0)])]),
            ("Alpha", [("Topsoil", [make_quantity(5, 6, 1, 0)])]),
        )

        table = aggregator.aggregate(material_lists)

        assert [(r.material_list_name, r.material_name, r.station_start) for r in table.rows] == [
            ("Zulu", "Rock", 30.0),
            ("Zulu", "Rock", 0.0),
            ("Zulu", "Clay", 20.0),
            ("Alpha", "Topsoil", 5.0),
        ]

    def test_empty_input(self, aggregator):
        """Test that no material lists yields an empty table with zero totals."""
        table = aggregator.aggregate([])

        assert table.is_empty
        assert table.total_cut == 0.0
        assert table.total_fill == 0.0
        assert table.faults == ()

    def test_failed_item_is_skipped(self, aggregator):
        """Test that an unreadable item contributes no rows and siblings continue."""
        material_lists = make_lists(("Earthworks", [
            ("Topsoil", [make_quantity(0, 10, 2, 1)]),
            ("Broken", [make_quantity(0, 10, 5, 5), make_quantity(10, 20, "lots", 0)]),
            ("Rock", [make_quantity(0, 10, 3, 0)]),
        ]))

        table = aggregator.aggregate(material_lists)

        assert [r.material_name for r in table.rows] == ["Topsoil", "Rock"]
        assert table.total_cut == 5.0
        assert table.total_fill == 1.0
        assert len(table.faults) == 1
        assert table.faults[0].stage == "extraction"
        assert table.faults[0].record_id == "ML-0/IT-1"

    def test_failed_list_is_skipped(self, aggregator):
        """Test that a list whose items cannot be read is recorded and skipped."""
        records = list(JsonDocument({"material_lists": [
            {"id": "ML-1", "name": "No Items", "alignment_id": "AL-1"},
            {"id": "ML-2", "name": "Good", "alignment_id": "AL-1", "items": [
                {"name": "Topsoil", "quantities": [make_quantity(0, 10, 4, 2)]},
            ]},
        ]}).list_material_lists())

        table = aggregator.aggregate(records)

        assert len(table.rows) == 1
        assert table.rows[0].material_list_name == "Good"
        assert table.rows[0].cumulative_cut == 4.0
        assert [(f.stage, f.record_id) for f in table.faults] == [("collection", "ML-1")]

    def test_item_without_quantities_array(self, aggregator):
        """Test that an item missing its quantities is an extraction fault."""
        material_lists = list(JsonDocument({"material_lists": [
            {"id": "ML-1", "name": "Earthworks", "alignment_id": "AL-1", "items": [{"name": "Empty"}]},
        ]}).list_material_lists())

        table = aggregator.aggregate(material_lists)

        assert table.is_empty
        assert table.faults[0].stage == "extraction"

    def test_rows_are_immutable(self, aggregator):
        """Test that produced rows cannot be modified."""
        table = aggregator.aggregate(make_lists(("Earthworks", [("Topsoil", [make_quantity(0, 1, 1, 1)])])))

        with pytest.raises(Exception):
            table.rows[0].cut_volume = 99.0

    def test_unreadable_item_name_is_skipped(self, aggregator):
        """Test that an item whose name faults is skipped and other lists still report."""
        broken = ListWithUnnamedItem({
            "id": "ML-1", "name": "Earthworks", "alignment_id": "AL-1",
            "items": [
                {"id": "IT-1", "name": "Topsoil", "quantities": [make_quantity(0, 10, 7, 1)]},
                {"id": "IT-2", "name": "Clay", "quantities": [make_quantity(0, 10, 1, 0)]},
            ],
        }, "material_lists[0]")
        good = make_lists(("Second", [("Rock", [make_quantity(0, 10, 2, 3)])]))[0]

        table = aggregator.aggregate([broken, good])

        assert [r.material_name for r in table.rows] == ["Clay", "Rock"]
        assert table.total_cut == 3.0
        assert table.total_fill == 3.0
        assert [(f.stage, f.record_id) for f in table.faults] == [("extraction", "IT-1")]
        assert "item name unreadable" in table.faults[0].reason

    def test_unreadable_list_name_is_skipped(self, aggregator):
        """Test that a list whose name faults is skipped with a collection fault."""
        broken = UnnamedMaterialRecord({
            "id": "ML-1", "alignment_id": "AL-1",
            "items": [{"name": "Topsoil", "quantities": [make_quantity(0, 10, 7, 1)]}],
        }, "material_lists[0]")
        good = make_lists(("Second", [("Rock", [make_quantity(0, 10, 2, 3)])]))[0]

        table = aggregator.aggregate([broken, good])

        assert [r.material_list_name for r in table.rows] == ["Second"]
        assert table.rows[0].cumulative_cut == 2.0
        assert [(f.stage, f.record_id) for f in table.faults] == [("collection", "ML-1")]
