from decimal import ROUND_HALF_UP, Decimal

import attrs


def round_half_up(value: float) -> int:
    """Nearest integer, halves away from zero (money is charged as this integer)."""
    return int(Decimal(str(value)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


@attrs.frozen
class OrderPricing:
    subtotal: float
    service_charge_percentage: float
    tax_percentage: float
    discount_percentage: float
    service_charge: float
    tax: float
    discount: float
    total_amount: float

    @property
    def gross_amount(self) -> int:
        return int(self.total_amount)

    @classmethod
    def calculate(
        cls,
        *,
        price: float,
        quantity: int,
        service_charge_percentage: float,
        tax_percentage: float,
    ) -> 'OrderPricing':
        subtotal = price * quantity
        service_charge = subtotal * service_charge_percentage / 100
        tax = subtotal * tax_percentage / 100
        return cls(
            subtotal=subtotal,
            service_charge_percentage=service_charge_percentage,
            tax_percentage=tax_percentage,
            discount_percentage=0,
            service_charge=service_charge,
            tax=tax,
            discount=0,
            total_amount=float(round_half_up(subtotal + service_charge + tax)),
        )
