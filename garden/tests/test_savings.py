import unittest
from garden.domain.Plant import Plant
from garden.logic.valuation.savings import compute_total_savings, filter_catalog, format_money


def _catalog():
    return [
        Plant(id="t1", name="Tomato", category="Vegetable", yield_per_plant_lbs=15, market_price_per_lb=4),
        Plant(id="c1", name="Carrot", category="Vegetable", yield_per_plant_lbs=0.2),
        Plant(id="s1", name="Strawberry", category="Fruit", yield_per_plant_lbs=1, market_price_per_lb=5),
        Plant(id="b1", name="Sweet Basil", category="Herb", yield_per_plant_lbs=0.5, market_price_per_lb=20),
    ]


class TestComputeTotalSavings(unittest.TestCase):

    def test_tomato_with_market_price(self):
        catalog = [Plant(id="t1", name="Tomato", yield_per_plant_lbs=15, market_price_per_lb=4)]
        self.assertEqual(compute_total_savings(catalog, {"t1": 2}), 120)

    def test_tomato_without_price_uses_fallback(self):
        catalog = [Plant(id="t1", name="Tomato", yield_per_plant_lbs=15)]
        self.assertEqual(compute_total_savings(catalog, {"t1": 2}), 135)

    def test_empty_selection_is_zero(self):
        self.assertEqual(compute_total_savings(_catalog(), {}), 0)
        self.assertEqual(compute_total_savings([], {"t1": 3}), 0)

    def test_selection_for_unknown_plant_is_ignored(self):
        self.assertEqual(compute_total_savings(_catalog(), {"gone": 10}), 0)

    def test_no_rounding_during_accumulation(self):
        # 3 carrots: 3 x 0.2 x 4.50
        self.assertAlmostEqual(compute_total_savings(_catalog(), {"c1": 3}), 2.7, places=9)

    def test_non_negative_and_monotone_in_each_quantity(self):
        catalog = _catalog()
        base = {"t1": 1, "c1": 2, "s1": 0, "b1": 3}
        base_total = compute_total_savings(catalog, base)
        self.assertGreaterEqual(base_total, 0)
        for plant in catalog:
            for bump in (1, 5, 50):
                bigger = dict(base, **{plant.id: base[plant.id] + bump})
                self.assertGreaterEqual(compute_total_savings(catalog, bigger), base_total)

    def test_inputs_are_not_mutated(self):
        catalog = _catalog()
        selection = {"t1": 2}
        compute_total_savings(catalog, selection)
        self.assertEqual(selection, {"t1": 2})
        self.assertEqual(len(catalog), 4)

    def test_format_money(self):
        self.assertEqual(format_money(135), "$135.00")
        self.assertEqual(format_money(1234.567), "$1,234.57")


class TestFilterCatalog(unittest.TestCase):

    def test_empty_search_and_all_returns_everything_in_order(self):
        catalog = _catalog()
        self.assertEqual(list(filter_catalog(catalog, "", "All")), catalog)

    def test_case_insensitive_substring(self):
        names = [p.name for p in filter_catalog(_catalog(), "BAS", "All")]
        self.assertEqual(names, ["Sweet Basil"])

    def test_category_must_match_exactly(self):
        names = [p.name for p in filter_catalog(_catalog(), "", "Vegetable")]
        self.assertEqual(names, ["Tomato", "Carrot"])
        self.assertEqual(list(filter_catalog(_catalog(), "", "vegetable")), [])

    def test_both_predicates_must_hold(self):
        self.assertEqual(list(filter_catalog(_catalog(), "tomato", "Fruit")), [])
        names = [p.name for p in filter_catalog(_catalog(), "r", "Vegetable")]
        self.assertEqual(names, ["Carrot"])

    def test_result_is_lazy_and_source_untouched(self):
        catalog = _catalog()
        result = filter_catalog(catalog, "straw", "All")
        self.assertFalse(isinstance(result, list))
        self.assertEqual([p.id for p in result], ["s1"])
        self.assertEqual(len(catalog), 4)


if __name__ == '__main__':
    unittest.main()
