"""Addition lesson: counting red and green cars in a car park."""

from __future__ import annotations

import argparse

PARKED = 8
ARRIVING = 3
GREEN_CARS = 3


def add_cars(parked: int, arriving: int) -> int:
    """Return how many cars there are after ``arriving`` join ``parked``."""
    return parked + arriving


def lesson_lines() -> list[str]:
    """Return the lesson text, one line per entry."""
    total = add_cars(PARKED, ARRIVING)
    total_all = add_cars(total, GREEN_CARS)

    ex1_old, ex1_new = 7, 3
    ex1_total = add_cars(ex1_old, ex1_new)
    ex2_old, ex2_new = 10, 5
    ex2_total = add_cars(ex2_old, ex2_new)

    return [
        "🥚 เริ่มต้นโปรแกรมนับไข่ไก่ของแม่ 🥚",
        "=====================================",
        "📖 โจทย์:",
        f"   มีรถแดงอยู่: {PARKED} คัน",
        f"   มีรถแดงมาจอดเพิ่ม: {ARRIVING} คัน",
        "   ❓ มีรถแดงอยู่ทั้งหมดกี่คัน?",
        "",
        "🧮 ขั้นตอนการคิด:",
        "   รถแดงที่จอดอยู่ + รถแดงที่มาจอดเพิ่ม",
        f"   = {PARKED} + {ARRIVING}",
        f"   = {total} คัน",
        "",
        "✅ คำตอบ:",
        f"   รวมมีรถแดงทั้งหมด {total} คัน",
        "",
        "🎨 ภาพประกอบ:",
        f"   รถแดงที่จอดอยู่:    🚗🚗🚗🚗 ({PARKED} คัน)",
        f"   รถแดงที่มาจอดเพิ่ม: 🚗🚗 ({ARRIVING} คัน)",
        f"   รวม:            🚗🚗🚗🚗🚗🚗 ({total} คัน)",
        "",
        f"🚙 มีรถเขียวมาจอด: {GREEN_CARS} คัน",
        f"🚗 รถแดงที่จอดอยู่ (รถแดง+รถเขียว): {total_all} คัน",
        "💡 ตัวอย่างเพิ่มเติม:",
        f"   รถแดงที่จอดอยู่ {ex1_old} คัน รถแดงที่มาจอดเพิ่ม {ex1_new} คัน",
        f"   จะมีรถแดงทั้งหมด {ex1_old} + {ex1_new} = {ex1_total} คัน",
        "",
        f"   รถแดงที่จอดอยู่ {ex2_old} คัน มีรถเขียวมาจอด {ex2_new} คัน",
        f"   จะมีรถทั้งหมด {ex2_old} + {ex2_new} = {ex2_total} คัน",
        "",
        "📚 สิ่งที่เรียนรู้:",
        "   1. การบวกเลข (Addition): a + b = c",
        "   2. การใช้ตัวแปร (Variables) เก็บค่า",
        "   3. การแสดงผลด้วย ESP_LOGI",
        "   4. การแก้โจทย์แบบมีขั้นตอน",
        "",
        "🎉 จบโปรแกรมนับรถ!",
        "📖 อ่านต่อในโปรเจคถัดไป: 02_subtraction_toys",
    ]


def main(argv: list[str] | None = None) -> int:
    """Print the addition lesson."""
    parser = argparse.ArgumentParser(
        prog="mathlessons-addition", description="Addition lesson with cars."
    )
    parser.parse_args(argv)
    for line in lesson_lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())