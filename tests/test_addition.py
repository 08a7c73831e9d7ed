import pytest

from mathlessons.addition import add_cars, lesson_lines, main


@pytest.mark.parametrize("a,b", [(8, 3), (7, 3), (10, 5), (0, 0), (123, 456)])
def test_add_cars_is_commutative(a, b):
    assert add_cars(a, b) == add_cars(b, a)


@pytest.mark.parametrize("n", [0, 1, 8, 1000])
def test_adding_zero_keeps_count(n):
    assert add_cars(n, 0) == n


@pytest.mark.parametrize("a,b", [(8, 3), (10, 5), (2, 40)])
def test_subtracting_arrivals_gives_parked(a, b):
    assert add_cars(a, b) - b == a


def test_lesson_shows_the_worked_sum():
    lines = lesson_lines()
    assert "   = 8 + 3" in lines
    assert f"   = {add_cars(8, 3)} คัน" in lines
    assert f"   รวมมีรถแดงทั้งหมด {add_cars(8, 3)} คัน" in lines


def test_lesson_includes_green_cars_total():
    lines = lesson_lines()
    expected = add_cars(add_cars(8, 3), 3)
    assert f"🚗 รถแดงที่จอดอยู่ (รถแดง+รถเขียว): {expected} คัน" in lines


def test_lesson_starts_and_ends_as_the_program_does():
    lines = lesson_lines()
    assert lines[0] == "🥚 เริ่มต้นโปรแกรมนับไข่ไก่ของแม่ 🥚"
    assert lines[-1] == "📖 อ่านต่อในโปรเจคถัดไป: 02_subtraction_toys"


def test_main_prints_every_line(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == lesson_lines()