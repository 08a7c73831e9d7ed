import pytest

from mathlessons.division import exact_divisors, lesson_lines, main, share


def test_share_exact():
    assert share(24, 6) == (4, 0)


@pytest.mark.parametrize("total,people", [(13, 4), (15, 3), (30, 7), (0, 5), (1, 9)])
def test_share_invariant(total, people):
    each, remainder = share(total, people)
    assert each * people + remainder == total
    assert 0 <= remainder < people


def test_share_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        share(24, 0)


def test_exact_divisors_all_divide():
    result = exact_divisors(30, 10)
    assert all(people * each == 30 for people, each in result)
    people = [p for p, _ in result]
    assert 1 in people and 10 in people
    assert 4 not in people and 7 not in people


def test_exact_divisors_respects_limit():
    assert all(people <= 5 for people, _ in exact_divisors(30, 5))
    assert exact_divisors(30, 0) == []


def test_lesson_shows_worked_problem():
    lines = lesson_lines()
    assert "   = 24 ÷ 6" in lines
    assert "✅ หารลงตัว! ทุกคนได้เท่ากัน" in lines
    assert "      เศษ = a % b" in lines


def test_lesson_one_line_per_friend():
    lines = lesson_lines()
    friend_lines = [line for line in lines if line.startswith("   เพื่อนคนที่ ")]
    assert len(friend_lines) == 6


def test_lesson_divisor_listing_matches_function():
    lines = lesson_lines()
    listed = [line for line in lines if line.startswith("   ✅ ") and "คน → คนละ" in line]
    assert len(listed) == len(exact_divisors(30, 10))


def test_main_prints_lesson(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "🎉 จบโปรแกรมแบ่งคุกกี้!" in out
    assert out.splitlines()[0] == lesson_lines()[0]