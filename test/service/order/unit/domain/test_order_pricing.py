import pytest

from src.service.order.domain.value_object.order_pricing import OrderPricing, round_half_up


pytestmark = pytest.mark.unit


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        'value,expected',
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (333.3333, 333), (115000.0, 115000)],
    )
    def test_halves_round_up(self, value, expected):
        assert round_half_up(value) == expected


class TestOrderPricing:
    def test_service_charge_and_tax_are_added_to_subtotal(self):
        # Act
        pricing = OrderPricing.calculate(
            price=100000, quantity=1, service_charge_percentage=5, tax_percentage=10
        )

        # Assert
        assert pricing.subtotal == 100000
        assert pricing.service_charge == 5000
        assert pricing.tax == 10000
        assert pricing.discount == 0
        assert pricing.discount_percentage == 0
        assert pricing.total_amount == 115000
        assert pricing.gross_amount == 115000

    def test_total_is_rounded_half_up(self):
        # 10 + 0.5 + 1.0 = 11.5
        pricing = OrderPricing.calculate(
            price=10, quantity=1, service_charge_percentage=5, tax_percentage=10
        )

        assert pricing.total_amount == 12
        assert isinstance(pricing.gross_amount, int)

    def test_subtotal_scales_with_quantity(self):
        pricing = OrderPricing.calculate(
            price=250000, quantity=2, service_charge_percentage=0, tax_percentage=0
        )

        assert pricing.subtotal == 500000
        assert pricing.total_amount == 500000
