"""Error-handling lesson: checked division, money, number input and interest."""

from __future__ import annotations

import argparse
import enum
import math
import re
import sys

MONEY_LIMIT = 1_000_000_000_000.0

_C_SPACE = "[ \t\n\v\f\r]*"
_DECIMAL = re.compile(
    _C_SPACE
    + r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    + r"|inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)",
    re.IGNORECASE,
)
_HEX = re.compile(
    _C_SPACE
    + r"[+-]?0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?",
    re.IGNORECASE,
)


class ErrorCode(enum.IntEnum):
    """Kinds of calculation failure."""

    NONE = 0
    DIVISION_BY_ZERO = 1
    INVALID_INPUT = 2
    OUT_OF_RANGE = 3
    NEGATIVE_VALUE = 4
    OVERFLOW = 5
    UNDERFLOW = 6


class CalculationError(Exception):
    """A calculation refused its input; carries the code and the user message."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        hint: str | None = None,
        show_art: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.hint = hint
        self.show_art = show_art


def art_lines(code: ErrorCode) -> list[str]:
    """Return the small picture shown for ``code``."""
    if code is ErrorCode.NONE:
        return ["   ✅ SUCCESS", "     🎉🎉🎉", "    สำเร็จแล้ว!"]
    if code is ErrorCode.DIVISION_BY_ZERO:
        return ["   🍕 ÷ 0 = ❌", "   😱 โอ้ะโอ!", "  ไม่มีลูกค้า!"]
    if code is ErrorCode.INVALID_INPUT:
        return ["   📝 ABC บาท?", "   🤔 งง...", "  ตัวเลขหายไป"]
    if code is ErrorCode.OUT_OF_RANGE:
        return ["   📈 ∞∞∞∞∞", "   😵 เกินขีด!", "  ใหญ่เกินไป"]
    return ["   ❓ ERROR", "   🔧 แก้ไข", "  ต้องตรวจสอบ"]


def safe_divide(dividend: float, divisor: float, context: str = "") -> float:
    """Return ``dividend / divisor``; ``context`` names the division for messages.

    Raises CalculationError on a zero divisor or an infinite result.
    """
    if divisor == 0.0:
        raise CalculationError(
            ErrorCode.DIVISION_BY_ZERO,
            "❌ หารด้วยศูนย์ไม่ได้!",
            hint="💡 ตรวจสอบจำนวนลูกค้าก่อนแบ่งพิซซ่า",
            show_art=True,
        )
    result = dividend / divisor
    if math.isinf(result):
        raise CalculationError(ErrorCode.OVERFLOW, "⚠️ ค่าผลลัพธ์เป็น Infinity!")
    return result


def _round_cents(amount: float) -> float:
    scaled = abs(amount) * 100
    return math.copysign(math.floor(scaled + 0.5), amount) / 100


def validate_money(amount: float, description: str = "") -> float:
    """Check an amount of money and return it rounded to whole satang.

    The amount is only rounded when it is more than 0.001 off two decimals.
    Raises CalculationError for negative or too large amounts.
    """
    if amount < 0:
        raise CalculationError(
            ErrorCode.NEGATIVE_VALUE,
            "❌ จำนวนเงินต้องไม่ติดลบ!",
            hint="💡 ตรวจสอบการคิดเงินใหม่",
        )
    if amount > MONEY_LIMIT:
        raise CalculationError(
            ErrorCode.OUT_OF_RANGE,
            "⚠️ จำนวนเงินเกินขีดจำกัด!",
            hint="💡 แนะนำ: ใช้ระบบธนาคารกลาง",
            show_art=True,
        )
    if math.isnan(amount):
        return amount
    rounded = _round_cents(amount)
    if abs(amount - rounded) > 0.001:
        return rounded
    return amount


def validate_number(text: str | None, field_name: str = "") -> float:
    """Parse ``text`` as a finite number, the whole string and nothing else.

    Raises CalculationError when the text is empty, not a number, or not finite.
    """
    if not text:
        raise CalculationError(ErrorCode.INVALID_INPUT, "❌ ไม่มีข้อมูล!")

    if _HEX.fullmatch(text):
        value = float.fromhex(text.strip(" \t\n\v\f\r"))
    elif _DECIMAL.fullmatch(text):
        body = text.strip(" \t\n\v\f\r")
        value = math.nan if "nan" in body.lower() else float(body)
    else:
        raise CalculationError(
            ErrorCode.INVALID_INPUT,
            f"❌ '{text}' ไม่ใช่ตัวเลข!",
            hint="💡 ใช้เฉพาะตัวเลข 0-9 และจุดทศนิยม",
            show_art=True,
        )

    if math.isnan(value) or math.isinf(value):
        raise CalculationError(ErrorCode.INVALID_INPUT, "❌ ตัวเลขไม่ถูกต้อง!")
    return value


def calculate_interest(principal: float, rate: float, years: int) -> float:
    """Return principal plus simple interest at ``rate`` per cent for ``years``.

    Raises CalculationError for a non-positive principal, a rate outside
    -100..100, a period outside 0..100 years, or a result too large.
    """
    if principal <= 0:
        raise CalculationError(ErrorCode.NEGATIVE_VALUE, "❌ เงินต้นต้องมากกว่าศูนย์!")
    if rate < -100 or rate > 100:
        raise CalculationError(
            ErrorCode.OUT_OF_RANGE,
            "❌ อัตราดอกเบี้ยไม่เหมาะสม!",
            hint="💡 ใช้ -100% ถึง 100% เท่านั้น",
        )
    if years < 0 or years > 100:
        raise CalculationError(ErrorCode.OUT_OF_RANGE, "❌ ระยะเวลาไม่เหมาะสม!")

    interest = principal * (rate / 100.0) * years
    total = principal + interest
    if total > sys.float_info.max / 2:
        raise CalculationError(ErrorCode.OVERFLOW, "⚠️ ผลลัพธ์ใหญ่เกินไป!")
    return total


def _failure_lines(err: CalculationError) -> list[str]:
    lines = [err.message]
    if err.show_art:
        lines += art_lines(err.code)
    if err.hint:
        lines.append(err.hint)
    return lines


def _divide_lines(dividend: float, divisor: float, context: str) -> list[str]:
    lines = ["", f"🔍 ตรวจสอบการหาร: {context}", f"📊 {dividend:.2f} ÷ {divisor:.2f} = ?"]
    try:
        result = safe_divide(dividend, divisor, context)
    except CalculationError as err:
        return lines + _failure_lines(err)
    return lines + [
        f"✅ สำเร็จ: {dividend:.2f} ÷ {divisor:.2f} = {result:.2f}",
        *art_lines(ErrorCode.NONE),
    ]


def _money_lines(amount: float, description: str) -> list[str]:
    lines = ["", f"💰 ตรวจสอบเงิน: {description}", f"💵 จำนวน: {amount:.2f} บาท"]
    try:
        checked = validate_money(amount, description)
    except CalculationError as err:
        return lines + _failure_lines(err)
    if checked != amount and not math.isnan(amount):
        lines.append(f"⚠️ ปัดเศษจาก {amount:.4f} → {checked:.2f} บาท")
    return lines + [f"✅ เงินถูกต้อง: {checked:.2f} บาท"]


def _number_lines(text: str, field_name: str) -> list[str]:
    lines = ["", f"🔢 ตรวจสอบตัวเลข: {field_name}", f"📝 ข้อมูลที่ป้อน: '{text}'"]
    try:
        value = validate_number(text, field_name)
    except CalculationError as err:
        return lines + _failure_lines(err)
    return lines + [f"✅ ตัวเลขถูกต้อง: {value:.2f}"]


def _interest_lines(principal: float, rate: float, years: int) -> list[str]:
    lines = [
        "",
        "🏦 คำนวณดอกเบี้ย",
        f"💰 เงินต้น: {principal:.2f} บาท",
        f"📈 อัตราดอกเบี้ย: {rate:.2f}% ต่อปี",
        f"⏰ ระยะเวลา: {years} ปี",
    ]
    try:
        total = calculate_interest(principal, rate, years)
    except CalculationError as err:
        return lines + _failure_lines(err)
    return lines + [f"✅ ดอกเบี้ย: {total - principal:.2f}, รวม: {total:.2f}"]


def lesson_lines() -> list[str]:
    """Return the lesson text, one line per entry."""
    lines = ["🚀 เริ่มต้นระบบจัดการข้อผิดพลาด!"]

    lines += ["", "🍕 === ร้านพิซซ่า ==="]
    lines += _divide_lines(12, 4, "แบ่งพิซซ่าให้ลูกค้า 4 คน")
    lines += _divide_lines(12, 0, "แบ่งพิซซ่าให้ลูกค้า 0 คน")
    lines += ["", "🌞 ฝนหยุดแล้ว! ลูกค้ามา 3 คน"]
    lines += _divide_lines(12, 4, "แบ่งพิซซ่าให้ลูกค้า 3 คน")

    lines += ["", "🛒 === ร้านขายของ ==="]
    lines += _number_lines("ABC", "ราคาสินค้า")
    lines += _number_lines("12.50", "ราคาสินค้า")
    lines += _money_lines(-50.0, "เงินทอน")
    lines += _money_lines(25.75, "เงินทอน")

    lines += ["", "🏦 === ธนาคาร ==="]
    lines += _interest_lines(100000, 2.5, 5)
    lines += _interest_lines(100000, -5.0, 5)
    lines += _money_lines(999999999999.0, "เงินฝาก")
    lines += _interest_lines(100000, 3.0, 10)

    lines += [
        "",
        "📚 === สรุปข้อผิดพลาด ===",
        "╔══════════════════════════════════════╗",
        "║ 🚫 Division by Zero  - หารด้วยศูนย์ ║",
        "║ 📝 Invalid Input      - ป้อนผิด     ║",
        "║ 📊 Out of Range       - เกินขอบเขต  ║",
        "║ ➖ Negative Value      - ค่าติดลบ     ║",
        "║ ⬆️ Overflow            - ล้นค่าระบบ ║",
        "╚══════════════════════════════════════╝",
        "",
        "🛡️ หลักการจัดการข้อผิดพลาด:",
        "✅ ตรวจสอบข้อมูลก่อนคำนวณ",
        "✅ แจ้งเตือนแบบเข้าใจง่าย",
        "✅ ให้คำแนะนำแก้ปัญหา",
        "✅ ป้องกัน crash หรือ hang",
        "✅ ใช้ enum + struct คุมสถานะ",
        "",
        "✅ เสร็จสิ้น! พร้อมเขียนโปรแกรมปลอดภัยแล้ว!",
    ]
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print the error-handling lesson."""
    parser = argparse.ArgumentParser(
        prog="mathlessons-validation", description="Error handling lesson."
    )
    parser.parse_args(argv)
    for line in lesson_lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())