"""Multiplication lesson: counting candies in bags."""

from __future__ import annotations

import argparse

NUMBER_OF_BAGS = 7
CANDIES_PER_BAG = 8
ORANGE_BAGS = 2
GRAPE_BAGS = 4
STRAWBERRY_BAGS = 3
FRIENDS = 12

_PAD = "                "


def repeated_addition(count: int, value: int) -> list[str]:
    """Return the column of ``value`` added ``count`` times, ending with the sum."""
    rows = []
    running = 0
    for i in range(1, count + 1):
        running += value
        if i == 1:
            rows.append(f"{_PAD}  {value}")
        elif i < count:
            rows.append(f"{_PAD}+ {value}")
        else:
            rows.append(f"{_PAD}+ {value} = {running}")
    return rows


def times_table(value: int, upto: int = 10) -> list[tuple[int, int]]:
    """Return ``(multiplier, product)`` pairs for 1..``upto`` times ``value``."""
    return [(i, i * value) for i in range(1, upto + 1)]


def share_candies(total: int, friends: int) -> tuple[int, int]:
    """Split ``total`` candies among ``friends``; return ``(each, left_over)``."""
    if friends <= 0:
        raise ValueError("number of friends must be greater than 0")
    return divmod(total, friends)


def lesson_lines() -> list[str]:
    """Return the lesson text, one line per entry."""
    total_bags = STRAWBERRY_BAGS + ORANGE_BAGS + GRAPE_BAGS
    per_friend, left_over = share_candies(total_bags * CANDIES_PER_BAG, FRIENDS)
    total = NUMBER_OF_BAGS * CANDIES_PER_BAG

    lines = [
        "🍬 เริ่มต้นโปรแกรมนับลูกอมในถุง 🍬",
        "====================================",
        "📖 โจทย์:",
        f"   มีถุงลูกอม: {NUMBER_OF_BAGS} ถุง",
        f"   ถุงละ: {CANDIES_PER_BAG} เม็ด",
        "   ❓ มีลูกอมทั้งหมดกี่เม็ด?",
        "",
        "🧮 ขั้นตอนการคิด:",
        "   จำนวนถุง × ลูกอมต่อถุง",
        f"   = {NUMBER_OF_BAGS} × {CANDIES_PER_BAG}",
        f"   = {total} เม็ด",
        "",
        "✅ คำตอบ:",
        f"   มีลูกอมทั้งหมด {total} เม็ด",
        "",
        f"🍓 สตรอเบอร์รี่: {STRAWBERRY_BAGS} ถุง = {STRAWBERRY_BAGS * CANDIES_PER_BAG} เม็ด",
        f"🍊 รสส้ม: {ORANGE_BAGS} ถุง = {ORANGE_BAGS * CANDIES_PER_BAG} เม็ด",
        f"🍇 รสองุ่น: {GRAPE_BAGS} ถุง = {GRAPE_BAGS * CANDIES_PER_BAG} เม็ด",
        "🎨 ภาพประกอบ:",
    ]
    lines += [
        f"   ถุงที่ {bag}: 🍬🍬🍬🍬🍬🍬 ({CANDIES_PER_BAG} เม็ด)" for bag in range(1, 6)
    ]
    lines += [
        f"   รวม:     {total} เม็ด",
        f"👥 แจกให้เพื่อน {FRIENDS} คน:",
        f"   คนละ {per_friend} เม็ด",
        f"   เหลือ {left_over} เม็ด",
        "",
        "🔄 เปรียบเทียบกับการบวกซ้ำๆ:",
        f"   การคูณ: {NUMBER_OF_BAGS} × {CANDIES_PER_BAG} = {total}",
        "   การบวกซ้ำๆ:",
    ]
    lines += repeated_addition(NUMBER_OF_BAGS, CANDIES_PER_BAG)
    lines += [
        "   ผลลัพธ์เหมือนกัน! การคูณคือการบวกซ้ำๆ",
        "",
        f"📊 ตารางสูตรคูณ {CANDIES_PER_BAG}:",
    ]
    table = times_table(CANDIES_PER_BAG)
    lines += [f"   {i} × {CANDIES_PER_BAG} = {product}" for i, product in table]
    lines.append(f"📊 ตารางสูตรคูณของ {CANDIES_PER_BAG}:")
    lines += [f"   {i} x {CANDIES_PER_BAG} = {product}" for i, product in table]
    lines += ["", "💡 ตัวอย่างเพิ่มเติม:"]

    for bags, candies in ((3, 8), (7, 4)):
        lines += [
            f"   ถ้ามีถุงลูกอม {bags} ถุง ถุงละ {candies} เม็ด",
            f"   จะได้ลูกอม {bags} × {candies} = {bags * candies} เม็ด",
            "",
        ]

    lines += [
        "🔄 เปรียบเทียบการดำเนินการ:",
        "   การบวก (+): เพิ่มจำนวน (เช่น ไข่ 4 + 2 = 6)",
        "   การลบ (-): ลดจำนวน (เช่น ของเล่น 8 - 3 = 5)",
        "   การคูณ (×): บวกซ้ำๆ (เช่น ลูกอม 5 × 6 = 30)",
        "",
        "🎓 แนวคิดขั้นสูง:",
        "   1. การคูณมีคุณสมบัติการสับเปลี่ยน:",
        f"      {NUMBER_OF_BAGS} × {CANDIES_PER_BAG} = {CANDIES_PER_BAG} × {NUMBER_OF_BAGS} = {total}",
        "   2. การคูณด้วย 0 จะได้ 0 เสมอ:",
        f"      {NUMBER_OF_BAGS} × 0 = 0 (ไม่มีถุงลูกอม)",
        "   3. การคูณด้วย 1 จะได้ตัวเลขเดิม:",
        f"      {CANDIES_PER_BAG} × 1 = {CANDIES_PER_BAG} (มีถุงเดียว)",
        "",
        "📚 สิ่งที่เรียนรู้:",
        "   1. การคูณเลข (Multiplication): a × b = c",
        "   2. การใช้ for loop สำหรับการทำซ้ำ",
        "   3. ความสัมพันธ์ระหว่างการคูณและการบวกซ้ำๆ",
        "   4. คุณสมบัติพิเศษของการคูณ",
        "   5. การแสดงผลแบบตาราง",
        "",
        "🎉 จบโปรแกรมนับลูกอมในถุง!",
        "📖 อ่านต่อในโปรเจคถัดไป: 04_division_cookies",
    ]
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print the multiplication lesson."""
    parser = argparse.ArgumentParser(
        prog="mathlessons-multiplication",
        description="Multiplication lesson with candies.",
    )
    parser.parse_args(argv)
    for line in lesson_lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())