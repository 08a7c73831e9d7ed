import pytest

from mathlessons.multiplication import (
    lesson_lines,
    main,
    repeated_addition,
    share_candies,
    times_table,
)


def test_repeated_addition_shape():
    rows = repeated_addition(7, 8)
    assert len(rows) == 7
    assert rows[0].strip() == "8"
    assert all(row.strip() == "+ 8" for row in rows[1:-1])
    assert rows[-1].endswith(f"= {7 * 8}")


def test_repeated_addition_single_and_empty():
    assert [row.strip() for row in repeated_addition(1, 5)] == ["5"]
    assert repeated_addition(0, 5) == []


@pytest.mark.parametrize("count,value", [(2, 3), (4, 9), (10, 1)])
def test_repeated_addition_sum_matches_product(count, value):
    assert repeated_addition(count, value)[-1].endswith(f"= {count * value}")


def test_times_table_default_length_and_products():
    table = times_table(8)
    assert [i for i, _ in table] == list(range(1, 11))
    assert all(product == i * 8 for i, product in table)


def test_times_table_custom_length():
    assert times_table(3, 0) == []
    assert len(times_table(3, 4)) == 4


@pytest.mark.parametrize("total,friends", [(72, 12), (56, 5), (3, 7), (0, 4)])
def test_share_candies_invariant(total, friends):
    each, left = share_candies(total, friends)
    assert each * friends + left == total
    assert 0 <= left < friends


@pytest.mark.parametrize("friends", [0, -3])
def test_share_candies_rejects_no_friends(friends):
    with pytest.raises(ValueError):
        share_candies(10, friends)


def test_lesson_content():
    lines = lesson_lines()
    assert "   = 7 × 8" in lines
    assert "👥 แจกให้เพื่อน 12 คน:" in lines
    assert sum(1 for line in lines if line.startswith("   ถุงที่")) == 5
    assert lines[-1] == "📖 อ่านต่อในโปรเจคถัดไป: 04_division_cookies"


def test_main_prints_every_line(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == lesson_lines()