import math
from datetime import datetime

import pytest

from mathlessons.calculator import (
    MAX_HISTORY,
    SALE_DESCRIPTION,
    Calculator,
    CalculatorError,
    CartItem,
    Operation,
    apply_discount,
    apply_tax,
    box_volume,
    circle_area,
    divide,
    factorial,
    main,
    percentage,
    power,
    rectangle_area,
    square_root,
)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def test_divide_inverts_multiplication():
    assert divide(144.0, 12.0) * 12.0 == pytest.approx(144.0)


def test_divide_by_zero_raises():
    with pytest.raises(CalculatorError):
        divide(1.0, 0.0)


def test_power_zero_to_negative_raises():
    with pytest.raises(CalculatorError):
        power(0.0, -2.0)


def test_power_half_matches_square_root():
    assert power(64.0, 0.5) == pytest.approx(square_root(64.0))


def test_power_negative_base_fractional_is_nan():
    result = power(-8.0, 0.5)
    assert str(result) == "nan"


def test_square_root_round_trip():
    assert square_root(64.0) ** 2 == pytest.approx(64.0)


def test_square_root_negative_raises():
    with pytest.raises(CalculatorError):
        square_root(-1.0)


@pytest.mark.parametrize("n", [0, 1, 5, 20])
def test_factorial_matches_stdlib(n):
    assert factorial(n) == float(math.factorial(n))


def test_factorial_too_large_is_infinite():
    assert factorial(21) == math.inf


def test_factorial_negative_raises():
    with pytest.raises(CalculatorError):
        factorial(-1)


def test_circle_area_radius_five():
    assert circle_area(5.0) == pytest.approx(78.54, abs=0.01)


def test_circle_area_negative_raises():
    with pytest.raises(CalculatorError):
        circle_area(-1.0)


def test_rectangle_area_commutes():
    assert rectangle_area(8.0, 6.0) == rectangle_area(6.0, 8.0)


def test_rectangle_area_negative_raises():
    with pytest.raises(CalculatorError):
        rectangle_area(-1.0, 2.0)


def test_box_volume_negative_raises():
    with pytest.raises(CalculatorError):
        box_volume(1.0, 2.0, -3.0)


def test_box_volume_unit_height_is_rectangle():
    assert box_volume(20.0, 15.0, 1.0) == rectangle_area(20.0, 15.0)


def test_percentage_of_hundred_is_value():
    assert percentage(200.0, 100.0) == 200.0


def test_discount_out_of_range_keeps_price():
    assert apply_discount(100.0, 150.0) == 100.0
    assert apply_discount(100.0, -5.0) == 100.0


def test_discount_plus_percentage_restores_price():
    assert apply_discount(200.0, 15.0) + percentage(200.0, 15.0) == pytest.approx(200.0)


def test_negative_tax_keeps_amount():
    assert apply_tax(50.0, -1.0) == 50.0


def test_tax_minus_percentage_restores_amount():
    assert apply_tax(50.0, 7.0) - percentage(50.0, 7.0) == pytest.approx(50.0)


def test_perform_records_description():
    calc = Calculator()
    result = calc.perform(Operation.ADD, 2.0, 3.0)
    entry = calc.history[-1]
    assert entry.result == result
    assert entry.description == "2.00 + 3.00 = 5.00"
    assert entry.id == 1
    assert calc.total_calculations == 1


def test_perform_timestamp_format():
    calc = Calculator()
    calc.perform(Operation.MULTIPLY, 12.0, 8.0)
    stamp = calc.history[0].timestamp
    parsed = datetime.strptime(stamp, TIMESTAMP_FORMAT)
    assert parsed.strftime(TIMESTAMP_FORMAT) == stamp
    assert len(stamp) == 19


def test_perform_accepts_plain_int():
    calc = Calculator()
    assert calc.perform(6, 64.0) == square_root(64.0)
    assert calc.history[-1].operation is Operation.SQRT


def test_perform_unknown_operation_raises():
    calc = Calculator()
    with pytest.raises(CalculatorError):
        calc.perform(99, 1.0, 2.0)
    assert calc.total_calculations == 0


def test_perform_error_not_recorded():
    calc = Calculator()
    with pytest.raises(CalculatorError):
        calc.perform(Operation.DIVIDE, 1.0, 0.0)
    assert len(calc.history) == 0
    assert calc.total_computation_time >= 0.0


def test_perform_infinite_result_not_recorded():
    calc = Calculator()
    assert calc.perform(Operation.FACTORIAL, 21.0) == math.inf
    assert calc.total_calculations == 0


def test_perform_volume_box_multiplies_two_operands():
    calc = Calculator()
    assert calc.perform(Operation.VOLUME_BOX, 4.0, 5.0) == rectangle_area(4.0, 5.0)


def test_history_is_bounded():
    calc = Calculator()
    for i in range(MAX_HISTORY + 5):
        calc.perform(Operation.ADD, float(i), 1.0)
    assert len(calc.history) == MAX_HISTORY
    assert calc.total_calculations == MAX_HISTORY + 5
    assert calc.history[0].id == 6
    assert calc.history[-1].id == MAX_HISTORY + 5


def test_recent_history_returns_latest_in_order():
    calc = Calculator()
    for i in range(8):
        calc.perform(Operation.ADD, float(i), 0.0)
    assert [e.id for e in calc.recent_history(5)] == [4, 5, 6, 7, 8]
    assert calc.recent_history(0) == []


def test_record_truncates_long_description():
    calc = Calculator()
    entry = calc.record(Operation.ADD, 0.0, 0.0, 0.0, "ก" * 100)
    assert len(entry.description.encode("utf-8")) <= 99


def test_checkout_totals_and_history():
    calc = Calculator()
    items = [
        CartItem(1, "น้ำดื่ม", 15.0, 2),
        CartItem(2, "ขนมปัง", 25.0, 1),
        CartItem(3, "กาแฟกระป๋อง", 45.0, 3),
    ]
    bill = calc.checkout(items, 10.0, 7.0)
    assert bill["subtotal"] == 190.0
    assert bill["total"] == pytest.approx(bill["after_discount"] + bill["tax"])
    assert bill["after_discount"] == pytest.approx(bill["subtotal"] - bill["discount"])
    entry = calc.history[-1]
    assert entry.description == SALE_DESCRIPTION
    assert entry.operation is Operation.DISCOUNT
    assert entry.result == bill["after_discount"]
    assert calc.cart == items


def test_checkout_rejects_too_many_items():
    calc = Calculator()
    items = [CartItem(i, "item", 1.0, 1) for i in range(11)]
    with pytest.raises(ValueError):
        calc.checkout(items)


def test_average_time_empty_and_after_use():
    calc = Calculator()
    assert calc.average_time() == 0.0
    calc.perform(Operation.ADD, 1.0, 1.0)
    calc.perform(Operation.SUBTRACT, 1.0, 1.0)
    assert calc.average_time() == pytest.approx(calc.total_computation_time / 2)


def test_main_runs_all_modes(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert SALE_DESCRIPTION in out
    assert "🎯 โปรแกรมเสร็จสิ้น - ขอบคุณที่ใช้งาน!" in out
    assert "📊 === โหมดประวัติ ===" in out