import sys

import pytest

from mathlessons.validation import (
    CalculationError,
    ErrorCode,
    art_lines,
    calculate_interest,
    lesson_lines,
    main,
    safe_divide,
    validate_money,
    validate_number,
)


def test_safe_divide_inverts_multiplication():
    result = safe_divide(12, 4, "pizza")
    assert result * 4 == 12


def test_safe_divide_by_zero():
    with pytest.raises(CalculationError) as info:
        safe_divide(12, 0, "pizza")
    assert info.value.code is ErrorCode.DIVISION_BY_ZERO
    assert info.value.message == "❌ หารด้วยศูนย์ไม่ได้!"
    assert info.value.hint == "💡 ตรวจสอบจำนวนลูกค้าก่อนแบ่งพิซซ่า"


def test_safe_divide_negative_zero_divisor():
    with pytest.raises(CalculationError) as info:
        safe_divide(1.0, -0.0)
    assert info.value.code is ErrorCode.DIVISION_BY_ZERO


def test_safe_divide_overflow():
    with pytest.raises(CalculationError) as info:
        safe_divide(1e308, 1e-10, "huge")
    assert info.value.code is ErrorCode.OVERFLOW


def test_error_str_is_message():
    with pytest.raises(CalculationError) as info:
        safe_divide(1, 0)
    assert str(info.value) == info.value.message


def test_validate_money_negative():
    with pytest.raises(CalculationError) as info:
        validate_money(-50.0, "change")
    assert info.value.code is ErrorCode.NEGATIVE_VALUE


def test_validate_money_too_large():
    with pytest.raises(CalculationError) as info:
        validate_money(2e12, "deposit")
    assert info.value.code is ErrorCode.OUT_OF_RANGE
    assert info.value.show_art


@pytest.mark.parametrize("amount", [25.75, 999999999999.0, 0.0, 10.1205])
def test_validate_money_keeps_near_exact_amounts(amount):
    assert validate_money(amount, "x") == amount


def test_validate_money_rounds_to_cents():
    assert validate_money(10.1234, "x") == pytest.approx(10.12)
    assert validate_money(10.126, "x") == pytest.approx(10.13)


def test_validate_money_result_is_whole_cents():
    result = validate_money(3.14159, "x")
    assert round(result * 100) == pytest.approx(result * 100)


@pytest.mark.parametrize("text", ["12.50", "  7", "-3.5e2", ".5", "+4."])
def test_validate_number_parses(text):
    assert validate_number(text, "price") == float(text)


def test_validate_number_hex():
    assert validate_number("0x10", "price") == 16.0


@pytest.mark.parametrize("text", ["ABC", "12abc", "1e", "7 ", "1_000", "0x", "   "])
def test_validate_number_rejects_non_numbers(text):
    with pytest.raises(CalculationError) as info:
        validate_number(text, "price")
    assert info.value.code is ErrorCode.INVALID_INPUT
    assert info.value.message == f"❌ '{text}' ไม่ใช่ตัวเลข!"


@pytest.mark.parametrize("text", ["", None])
def test_validate_number_empty(text):
    with pytest.raises(CalculationError) as info:
        validate_number(text, "price")
    assert info.value.message == "❌ ไม่มีข้อมูล!"


@pytest.mark.parametrize("text", ["nan", "inf", "-Infinity", "1e999"])
def test_validate_number_not_finite(text):
    with pytest.raises(CalculationError) as info:
        validate_number(text, "price")
    assert info.value.message == "❌ ตัวเลขไม่ถูกต้อง!"


def test_interest_zero_rate_keeps_principal():
    assert calculate_interest(100000, 0.0, 5) == 100000


def test_interest_zero_years_keeps_principal():
    assert calculate_interest(5000, 3.0, 0) == 5000


def test_interest_is_linear_in_years():
    one = calculate_interest(100000, 2.5, 1) - 100000
    five = calculate_interest(100000, 2.5, 5) - 100000
    assert five == pytest.approx(5 * one)


def test_negative_rate_reduces_total():
    assert calculate_interest(100000, -5.0, 5) < 100000


@pytest.mark.parametrize("principal", [0, -1.0])
def test_interest_non_positive_principal(principal):
    with pytest.raises(CalculationError) as info:
        calculate_interest(principal, 2.5, 5)
    assert info.value.code is ErrorCode.NEGATIVE_VALUE


@pytest.mark.parametrize("rate,years", [(150.0, 5), (-101.0, 5), (2.0, 101), (2.0, -1)])
def test_interest_out_of_range(rate, years):
    with pytest.raises(CalculationError) as info:
        calculate_interest(100000, rate, years)
    assert info.value.code is ErrorCode.OUT_OF_RANGE


def test_interest_overflow():
    with pytest.raises(CalculationError) as info:
        calculate_interest(sys.float_info.max / 2, 100.0, 1)
    assert info.value.code is ErrorCode.OVERFLOW


def test_art_lines():
    assert art_lines(ErrorCode.NONE)[0] == "   ✅ SUCCESS"
    assert art_lines(ErrorCode.DIVISION_BY_ZERO)[0] == "   🍕 ÷ 0 = ❌"
    assert art_lines(ErrorCode.NEGATIVE_VALUE) == art_lines(ErrorCode.OVERFLOW)
    assert art_lines(ErrorCode.UNDERFLOW)[0] == "   ❓ ERROR"


def test_lesson_lines_cover_scenarios():
    lines = lesson_lines()
    assert lines[0] == "🚀 เริ่มต้นระบบจัดการข้อผิดพลาด!"
    assert "❌ หารด้วยศูนย์ไม่ได้!" in lines
    assert "❌ 'ABC' ไม่ใช่ตัวเลข!" in lines
    assert "❌ จำนวนเงินต้องไม่ติดลบ!" in lines
    assert "✅ เงินถูกต้อง: 25.75 บาท" in lines
    assert lines[-1] == "✅ เสร็จสิ้น! พร้อมเขียนโปรแกรมปลอดภัยแล้ว!"


def test_main_prints_lesson(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == lesson_lines()