"""All-in-one calculator: basic, advanced and shop modes with a history."""

from __future__ import annotations

import argparse
import enum
import logging
import math
import time
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

PI = 3.14159265359
MAX_HISTORY = 50
MAX_CART_ITEMS = 10
MAX_DESCRIPTION_BYTES = 99
VERSION = "1.0.0"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
SALE_DESCRIPTION = "การขายหน้าร้าน"

logger = logging.getLogger(__name__)


class Mode(enum.IntEnum):
    """Screens the calculator can show."""

    MAIN_MENU = 0
    BASIC = 1
    ADVANCED = 2
    SHOP = 3
    HISTORY = 4
    EXIT = 5


class Operation(enum.IntEnum):
    """Calculations the calculator knows."""

    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4
    POWER = 5
    SQRT = 6
    FACTORIAL = 7
    AREA_CIRCLE = 8
    AREA_RECTANGLE = 9
    VOLUME_BOX = 10
    PERCENTAGE = 11
    DISCOUNT = 12
    TAX = 13


class CalculatorError(ValueError):
    """A calculation was refused; the message is meant for the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class HistoryEntry:
    """One recorded calculation."""

    id: int
    operation: Operation
    operand1: float
    operand2: float
    result: float
    timestamp: str
    description: str


@dataclass(frozen=True)
class CartItem:
    """A product in the shop cart."""

    id: int
    name: str
    price: float
    quantity: int

    @property
    def total(self) -> float:
        """Price of the whole quantity."""
        return self.price * self.quantity


def divide(a: float, b: float) -> float:
    """Return ``a / b``; raise CalculatorError when ``b`` is zero."""
    if b == 0.0:
        raise CalculatorError("❌ ข้อผิดพลาด: ไม่สามารถหารด้วยศูนย์ได้!")
    return a / b


def power(base: float, exponent: float) -> float:
    """Return ``base`` raised to ``exponent``.

    Zero to a negative power raises CalculatorError; a result outside the
    real numbers is NaN and an overflowing one is infinite.
    """
    if base == 0.0 and exponent < 0:
        raise CalculatorError("❌ ข้อผิดพลาด: 0 ยกกำลังลบไม่ได้!")
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        odd_integer = float(exponent).is_integer() and int(exponent) % 2 == 1
        return -math.inf if base < 0 and odd_integer else math.inf


def square_root(a: float) -> float:
    """Return the square root of ``a``; negative input raises CalculatorError."""
    if a < 0:
        raise CalculatorError("❌ ข้อผิดพลาด: ไม่สามารถหารากที่สองของจำนวนลบได้!")
    return math.sqrt(a)


def factorial(n: int) -> float:
    """Return ``n!`` as a float; infinity above 20, CalculatorError below 0."""
    if n < 0:
        raise CalculatorError("❌ ข้อผิดพลาด: แฟกทอเรียลของจำนวนลบไม่ได้!")
    if n > 20:
        logger.warning("⚠️ เตือน: แฟกทอเรียลใหญ่เกินไป!")
        return math.inf
    return float(math.prod(range(2, n + 1)))


def circle_area(radius: float) -> float:
    """Return the area of a circle; a negative radius raises CalculatorError."""
    if radius < 0:
        raise CalculatorError("❌ รัศมีไม่สามารถเป็นลบได้!")
    return PI * radius * radius


def rectangle_area(length: float, width: float) -> float:
    """Return ``length * width``; negative sides raise CalculatorError."""
    if length < 0 or width < 0:
        raise CalculatorError("❌ ความยาวและความกว้างไม่สามารถเป็นลบได้!")
    return length * width


def box_volume(length: float, width: float, height: float) -> float:
    """Return the volume of a box; negative sides raise CalculatorError."""
    if length < 0 or width < 0 or height < 0:
        raise CalculatorError("❌ ขนาดทุกด้านต้องเป็นบวก!")
    return length * width * height


def percentage(value: float, percent: float) -> float:
    """Return ``percent`` per cent of ``value``."""
    return value * percent / 100.0


def apply_discount(original_price: float, discount_percent: float) -> float:
    """Return the price after the discount; outside 0..100 the price is unchanged."""
    if discount_percent < 0 or discount_percent > 100:
        logger.warning("⚠️ ส่วนลดควรอยู่ระหว่าง 0-100%")
        return original_price
    return original_price - percentage(original_price, discount_percent)


def apply_tax(amount: float, tax_rate: float) -> float:
    """Return ``amount`` with tax added; a negative rate leaves it unchanged."""
    if tax_rate < 0:
        logger.warning("⚠️ อัตราภาษีไม่ควรเป็นลบ")
        return amount
    return amount + percentage(amount, tax_rate)


def _truncate_bytes(text: str, limit: int) -> str:
    return text.encode("utf-8")[:limit].decode("utf-8", errors="ignore")


def _compute(op: Operation, op1: float, op2: float) -> tuple[float, str]:
    match op:
        case Operation.ADD:
            r = op1 + op2
            return r, f"{op1:.2f} + {op2:.2f} = {r:.2f}"
        case Operation.SUBTRACT:
            r = op1 - op2
            return r, f"{op1:.2f} - {op2:.2f} = {r:.2f}"
        case Operation.MULTIPLY:
            r = op1 * op2
            return r, f"{op1:.2f} × {op2:.2f} = {r:.2f}"
        case Operation.DIVIDE:
            r = divide(op1, op2)
            return r, f"{op1:.2f} ÷ {op2:.2f} = {r:.2f}"
        case Operation.POWER:
            r = power(op1, op2)
            return r, f"{op1:.2f} ^ {op2:.2f} = {r:.2f}"
        case Operation.SQRT:
            r = square_root(op1)
            return r, f"√{op1:.2f} = {r:.2f}"
        case Operation.FACTORIAL:
            r = factorial(int(op1))
            return r, f"{op1:.0f}! = {r:.0f}"
        case Operation.AREA_CIRCLE:
            r = circle_area(op1)
            return r, f"พื้นที่วงกลม r={op1:.2f} = {r:.2f}"
        case Operation.AREA_RECTANGLE:
            r = rectangle_area(op1, op2)
            return r, f"พื้นที่สี่เหลี่ยม {op1:.2f}×{op2:.2f} = {r:.2f}"
        case Operation.VOLUME_BOX:
            r = op1 * op2
            return r, f"ปริมาตรกล่อง = {r:.2f}"
        case Operation.PERCENTAGE:
            r = percentage(op1, op2)
            return r, f"{op2:.2f}% ของ {op1:.2f} = {r:.2f}"
        case Operation.DISCOUNT:
            r = apply_discount(op1, op2)
            return r, f"ลด {op2:.2f}% จาก {op1:.2f} = {r:.2f}"
        case Operation.TAX:
            r = apply_tax(op1, op2)
            return r, f"ภาษี {op2:.2f}% จาก {op1:.2f} = {r:.2f}"
    raise CalculatorError("❌ การดำเนินการไม่รู้จัก!")


@dataclass
class Calculator:
    """Calculator state: history, statistics and the shop cart."""

    history: deque[HistoryEntry] = field(
        default_factory=lambda: deque(maxlen=MAX_HISTORY)
    )
    total_calculations: int = 0
    total_computation_time: float = 0.0
    last_duration_ms: float = 0.0
    mode: Mode = Mode.MAIN_MENU
    cart: list[CartItem] = field(default_factory=list)
    shop_total: float = 0.0
    shop_discount: float = 0.0
    shop_tax_rate: float = 7.0

    def perform(self, op: Operation | int, op1: float, op2: float = 0.0) -> float:
        """Run one calculation and return its result.

        Finite results are recorded in the history; the time taken is added to
        the statistics either way. Refused input raises CalculatorError.
        """
        try:
            operation = Operation(op)
        except ValueError:
            raise CalculatorError("❌ การดำเนินการไม่รู้จัก!") from None

        start = time.perf_counter()
        try:
            result, description = _compute(operation, op1, op2)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            self.last_duration_ms = elapsed_ms
            self.total_computation_time += elapsed_ms

        if math.isfinite(result):
            self.record(operation, op1, op2, result, description)
        return result

    def record(
        self,
        op: Operation | int,
        op1: float,
        op2: float,
        result: float,
        description: str,
    ) -> HistoryEntry:
        """Add an entry to the history, dropping the oldest beyond the limit."""
        entry = HistoryEntry(
            id=self.total_calculations + 1,
            operation=Operation(op),
            operand1=op1,
            operand2=op2,
            result=result,
            timestamp=datetime.now().strftime(TIMESTAMP_FORMAT),
            description=_truncate_bytes(description, MAX_DESCRIPTION_BYTES),
        )
        self.history.append(entry)
        self.total_calculations += 1
        return entry

    def recent_history(self, count: int = 5) -> list[HistoryEntry]:
        """Return the last ``count`` history entries, oldest first."""
        if count <= 0:
            return []
        return list(self.history)[-count:]

    def checkout(
        self,
        items: Iterable[CartItem],
        discount_percent: float = 10.0,
        tax_rate: float = 7.0,
    ) -> dict[str, float]:
        """Fill the cart, price it and record the sale.

        Returns the subtotal, discount, amount after discount, tax and total.
        Raises ValueError when the cart would hold more than ten items.
        """
        cart = list(items)
        if len(cart) > MAX_CART_ITEMS:
            raise ValueError(f"the cart holds at most {MAX_CART_ITEMS} items")
        self.cart = cart
        self.shop_discount = discount_percent
        self.shop_tax_rate = tax_rate
        self.shop_total = sum((item.total for item in cart), 0.0)

        discount = percentage(self.shop_total, discount_percent)
        after_discount = self.shop_total - discount
        tax = percentage(after_discount, tax_rate)
        total = after_discount + tax

        self.record(
            Operation.DISCOUNT,
            self.shop_total,
            discount_percent,
            after_discount,
            SALE_DESCRIPTION,
        )
        return {
            "subtotal": self.shop_total,
            "discount": discount,
            "after_discount": after_discount,
            "tax": tax,
            "total": total,
        }

    def average_time(self) -> float:
        """Return the mean time per calculation in milliseconds, 0.0 if none."""
        if self.total_calculations == 0:
            return 0.0
        return self.total_computation_time / self.total_calculations


def _logo_lines() -> list[str]:
    return [
        "╔════════════════════════════════════════════════╗",
        f"║          🧮 เครื่องคิดเลขครบครัน v{VERSION}        ║",
        "║                ESP32 Calculator               ║",
        "╠════════════════════════════════════════════════╣",
        "║  📱 Modern • 🛡️ Safe • ⚡ Fast • 🎯 Accurate  ║",
        "╚════════════════════════════════════════════════╝",
        "",
        "    🧮    💻    📊    🏪",
        "   Basic Advanced Stats Shop",
        "",
    ]


def _menu_lines(calc: Calculator) -> list[str]:
    return [
        "",
        "╔══════════════════════════════════════════════════╗",
        "║                   🧮 เมนูหลัก                   ║",
        "╠══════════════════════════════════════════════════╣",
        "║ [1] 🔢 โหมดพื้นฐาน - Basic Calculator         ║",
        "║ [2] 🔬 โหมดขั้นสูง - Advanced Mathematics     ║",
        "║ [3] 🏪 โหมดร้านค้า - Shop POS System          ║",
        "║ [4] 📊 โหมดประวัติ - History & Statistics     ║",
        "║ [0] 🚪 ออกจากโปรแกรม - Exit                  ║",
        "╚══════════════════════════════════════════════════╝",
        "",
        f"📊 สถิติ: {calc.total_calculations} การคำนวณ | "
        f"{calc.total_computation_time:.2f} มิลลิวินาที รวม",
    ]


def _perform_lines(calc: Calculator, op: Operation, op1: float, op2: float) -> list[str]:
    try:
        result = calc.perform(op, op1, op2)
    except CalculatorError as err:
        return [err.message]
    if not math.isfinite(result):
        return []
    entry = calc.history[-1]
    return [
        f"💾 บันทึกประวัติ #{entry.id}: {entry.description}",
        "",
        "=== การคำนวณเสร็จสิ้น ===",
        f"📊 ผลลัพธ์: {result:.2f}",
        f"⏰ เวลาที่ใช้: {calc.last_duration_ms / 1000.0:.3f} วินาที",
        f"💾 บันทึกประวัติแล้ว (#{calc.total_calculations})",
        "✅ ตรวจสอบความถูกต้องแล้ว",
        "",
    ]


def _basic_lines(calc: Calculator) -> list[str]:
    calc.mode = Mode.BASIC
    lines = [
        "",
        "🔢 === โหมดพื้นฐาน ===",
        "╔═══════════════════════════════════════╗",
        "║         การดำเนินการพื้นฐาน         ║",
        "╠═══════════════════════════════════════╣",
        "║ [1] ➕ บวก     [2] ➖ ลบ            ║",
        "║ [3] ✖️ คูณ      [4] ➗ หาร           ║",
        "║ [5] 🔢 ยกกำลัง [6] √ รากที่สอง      ║",
        "║ [7] ! แฟกทอเรียล                    ║",
        "╚═══════════════════════════════════════╝",
    ]
    demos = [
        (Operation.ADD, 25.5, 14.3),
        (Operation.SUBTRACT, 100.0, 37.5),
        (Operation.MULTIPLY, 12.0, 8.0),
        (Operation.DIVIDE, 144.0, 12.0),
        (Operation.POWER, 2.0, 8.0),
        (Operation.SQRT, 64.0, 0.0),
        (Operation.FACTORIAL, 5.0, 0.0),
    ]
    for number, (op, a, b) in enumerate(demos, start=1):
        lines += ["", f"🎯 ตัวอย่างที่ {number}:"]
        lines += _perform_lines(calc, op, a, b)
    return lines


def _advanced_lines(calc: Calculator) -> list[str]:
    calc.mode = Mode.ADVANCED
    lines = [
        "",
        "🔬 === โหมดขั้นสูง ===",
        "╔══════════════════════════════════════════╗",
        "║            คณิตศาสตร์ขั้นสูง           ║",
        "╠══════════════════════════════════════════╣",
        "║ 📐 เรขาคณิต และ การคำนวณพิเศษ         ║",
        "╚══════════════════════════════════════════╝",
        "",
        "🎯 พื้นที่วงกลม รัศมี 5 เมตร:",
    ]
    lines += _perform_lines(calc, Operation.AREA_CIRCLE, 5.0, 0.0)
    lines += ["", "🎯 พื้นที่สี่เหลี่ยม 8×6 เมตร:"]
    lines += _perform_lines(calc, Operation.AREA_RECTANGLE, 8.0, 6.0)
    lines += ["", "🎯 15% ของ 200 บาท:"]
    lines += _perform_lines(calc, Operation.PERCENTAGE, 200.0, 15.0)
    return lines


DEMO_CART = (
    CartItem(1, "น้ำดื่ม", 15.0, 2),
    CartItem(2, "ขนมปัง", 25.0, 1),
    CartItem(3, "กาแฟกระป๋อง", 45.0, 3),
)


def _shop_lines(calc: Calculator) -> list[str]:
    calc.mode = Mode.SHOP
    lines = [
        "",
        "🏪 === โหมดร้านค้า ===",
        '🛒 ระบบ POS ร้านสะดวกซื้อ "คิดเก่ง"',
        "",
        "🛒 เพิ่มสินค้าในตะกร้า:",
    ]
    lines += [
        f"➕ {item.name}: {item.price:.2f} × {item.quantity} = {item.total:.2f} บาท"
        for item in DEMO_CART
    ]
    bill = calc.checkout(DEMO_CART, discount_percent=10.0, tax_rate=7.0)
    lines += [
        "",
        "💰 สรุปการคำนวณ:",
        "╔════════════════════════════════════════════╗",
        "║              🧾 ใบเสร็จ                  ║",
        "╠════════════════════════════════════════════╣",
    ]
    lines += [
        f"║ {item.name}  {item.price:.2f}×{item.quantity}  {item.total:.2f} ║"
        for item in calc.cart
    ]
    entry = calc.history[-1]
    lines += [
        "╠════════════════════════════════════════════╣",
        f"║ 📊 ยอดรวม:                    {bill['subtotal']:.2f} บาท ║",
        f"║ 🎫 ส่วนลด {calc.shop_discount:.0f}%:               -{bill['discount']:.2f} บาท ║",
        f"║ 💵 หลังหักส่วนลด:             {bill['after_discount']:.2f} บาท ║",
        f"║ 🏛️ ภาษี {calc.shop_tax_rate:.0f}%:                 +{bill['tax']:.2f} บาท ║",
        f"║ 💳 ยอดชำระสุทธิ:              {bill['total']:.2f} บาท ║",
        "╚════════════════════════════════════════════╝",
        f"💾 บันทึกประวัติ #{entry.id}: {entry.description}",
    ]
    return lines


def _history_lines(calc: Calculator) -> list[str]:
    calc.mode = Mode.HISTORY
    lines = ["", "📊 === โหมดประวัติ ==="]
    if not calc.history:
        return lines + ["📝 ยังไม่มีประวัติการคำนวณ"]
    lines += [
        "╔════════════════════════════════════════════════════════╗",
        "║                    📋 ประวัติการคำนวณ                  ║",
        "╠════════════════════════════════════════════════════════╣",
    ]
    lines += [
        f"║ #{entry.id:03d} │ {entry.timestamp} │ {entry.description} ║"
        for entry in calc.recent_history(5)
    ]
    lines += [
        "╚════════════════════════════════════════════════════════╝",
        "",
        "📈 สถิติการใช้งาน:",
        "╔═══════════════════════════════════════╗",
        "║          📊 สรุปการใช้งาน           ║",
        "╠═══════════════════════════════════════╣",
        f"║ 🔢 การคำนวณทั้งหมด: {calc.total_calculations} ครั้ง       ║",
        f"║ ⏱️ เวลารวม: {calc.total_computation_time:.2f} มิลลิวินาที       ║",
    ]
    if calc.total_calculations > 0:
        avg = calc.average_time()
        rating = "ยอดเยี่ยม" if avg < 1.0 else "ดี" if avg < 5.0 else "ปกติ"
        lines += [
            f"║ ⚡ เวลาเฉลี่ย: {avg:.3f} มิลลิวินาที     ║",
            f"║ 🚀 ประสิทธิภาพ: {rating}                ║",
        ]
    lines += [
        "║ ⭐ ความแม่นยำ: 100%               ║",
        "╚═══════════════════════════════════════╝",
    ]
    return lines


def _summary_lines(calc: Calculator) -> list[str]:
    return [
        "",
        "🎉 === ขอบคุณที่ใช้งาน ===",
        "╔════════════════════════════════════════════════════╗",
        f"║           🧮 เครื่องคิดเลขครบครัน v{VERSION}           ║",
        "╠════════════════════════════════════════════════════╣",
        f"║ ✅ การคำนวณทั้งหมด: {calc.total_calculations} ครั้ง                     ║",
        f"║ ⏱️ เวลาที่ใช้รวม: {calc.total_computation_time:.2f} มิลลิวินาที                ║",
        "║ 🏆 ประสิทธิภาพ: เยี่ยม                           ║",
        "║ 🛡️ ความปลอดภัย: สูงสุด                          ║",
        "╚════════════════════════════════════════════════════╝",
        "",
        "🎓 สิ่งที่ได้เรียนรู้:",
        "✅ การเขียนโปรแกรม ESP32 ด้วย C",
        "✅ การจัดการข้อผิดพลาดแบบมืออาชีพ",
        "✅ การสร้างระบบเมนูและ UI",
        "✅ การคำนวณคณิตศาสตร์ขั้นสูง",
        "✅ การประยุกต์ใช้ในงานจริง",
        "",
        "🚀 คุณพร้อมสำหรับโปรเจคถัดไปแล้ว!",
        "💝 ขอบคุณและขอให้โชคดี!",
    ]


def main(argv: list[str] | None = None) -> int:
    """Run the calculator demonstration through every menu."""
    parser = argparse.ArgumentParser(
        prog="mathlessons-calculator", description="All-in-one calculator demo."
    )
    parser.parse_args(argv)

    calc = Calculator()
    sections = {
        1: _basic_lines,
        2: _advanced_lines,
        3: _shop_lines,
        4: _history_lines,
    }

    def emit(lines: list[str]) -> None:
        for line in lines:
            print(line)

    emit(["🚀 เริ่มต้นเครื่องคิดเลขครบครัน!"])
    emit(_logo_lines())
    emit([
        "⚡ ระบบพร้อมใช้งาน!",
        "🛡️ ระบบป้องกันข้อผิดพลาดเปิดใช้งาน",
        "💾 ระบบบันทึกประวัติพร้อม",
    ])
    for choice, section in sections.items():
        calc.mode = Mode.MAIN_MENU
        emit(_menu_lines(calc))
        emit([f"🎯 เลือกเมนู: {choice}"])
        emit(section(calc))
    calc.mode = Mode.EXIT
    emit(_summary_lines(calc))
    emit(["", "🎯 โปรแกรมเสร็จสิ้น - ขอบคุณที่ใช้งาน!"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())