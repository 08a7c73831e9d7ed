"""Shopping lesson: a market bill with discount, VAT and a split payment."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass

DISCOUNT_PERCENT = 10.0
VAT_PERCENT = 7.0
PEOPLE = 3


@dataclass(frozen=True)
class Product:
    """An item on the bill: a name, a quantity and a price per unit."""

    name: str
    quantity: int
    price_per_unit: float

    def total(self) -> float:
        """Return the price of the whole quantity."""
        return self.quantity * self.price_per_unit


DEFAULT_PRODUCTS = (
    Product("แอปเปิ้ล", 6, 15.0),
    Product("กล้วย", 12, 8.0),
    Product("ส้ม", 8, 12.0),
    Product("ช็อกโกแลต", 3, 30.0),
)


def bill_total(products: Iterable[Product]) -> float:
    """Return the sum of all product totals."""
    return sum((product.total() for product in products), 0.0)


def apply_percentage_discount(total: float, percent: float) -> float:
    """Return ``total`` reduced by ``percent`` per cent."""
    return total - total * percent / 100.0


def apply_vat(total: float, vat_percent: float) -> float:
    """Return ``total`` with ``vat_percent`` per cent tax added."""
    return total + total * vat_percent / 100.0


def split_payment(amount: float, people: int) -> float:
    """Return each person's share of ``amount``.

    Raises ValueError when ``people`` is not positive.
    """
    if people <= 0:
        raise ValueError("number of people must be greater than 0")
    return amount / people


def receipt_lines(
    products: Iterable[Product],
    discount_percent: float = DISCOUNT_PERCENT,
    vat_percent: float = VAT_PERCENT,
    people: int = PEOPLE,
) -> list[str]:
    """Return the item list and the cost summary as lines of text."""
    items = list(products)
    subtotal = bill_total(items)
    discount_amount = subtotal * (discount_percent / 100.0)
    discounted = apply_percentage_discount(subtotal, discount_percent)
    with_vat = apply_vat(discounted, vat_percent)
    per_person = split_payment(with_vat, people)

    lines = ["📖 รายการสินค้า:"]
    lines += [
        f"   {p.name}: {p.quantity} × {p.price_per_unit:.0f} = {p.total():.0f} บาท"
        for p in items
    ]
    lines += [
        "",
        "💰 สรุปค่าใช้จ่าย:",
        f"   ยอดรวมก่อนส่วนลด:           {subtotal:.2f} บาท",
        f"   ส่วนลด {discount_percent:.0f}%:                -{discount_amount:.2f} บาท",
        f"   ยอดหลังหักส่วนลด:            {discounted:.2f} บาท",
        f"   ภาษีมูลค่าเพิ่ม (VAT {vat_percent:.0f}%): +{with_vat - discounted:.2f} บาท",
        f"   ยอดสุทธิรวม VAT:             {with_vat:.2f} บาท",
        f"   แบ่งจ่าย {people} คน:               {per_person:.2f} บาท/คน",
        "",
    ]
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print the shopping lesson."""
    parser = argparse.ArgumentParser(
        prog="mathlessons-shopping", description="Shopping bill lesson."
    )
    parser.parse_args(argv)
    lines = [
        "🛒 เริ่มต้นโปรแกรมซื้อของที่ตลาด (เวอร์ชันใหม่) 🛒",
        "=====================================",
    ]
    lines += receipt_lines(DEFAULT_PRODUCTS)
    lines += [
        "🌟 การประยุกต์ใช้ในชีวิตจริง:",
        "   - การซื้อของเป็นกลุ่ม",
        "   - การแบ่งบิลในร้านอาหาร",
        "   - การคำนวณงบประมาณแบบรวมภาษี",
        "   - การทำระบบคิดเงินอัตโนมัติ",
        "",
        "🎉 จบโปรแกรมซื้อของที่ตลาดเวอร์ชันใหม่!",
    ]
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())