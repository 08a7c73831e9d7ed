"""Subtraction lesson: giving toys away to friends."""

from __future__ import annotations

import argparse

TOYS_HAVE = 15
TOYS_GIVE_AWAY = 7
DOLLS = 5
ROBOTS = 2


def give_away(have: int, give: int) -> tuple[int, int]:
    """Give up to ``give`` toys out of ``have``.

    Returns ``(given, remaining)``; nobody can give more than they own, so
    ``given`` is capped at ``have``.
    """
    given = min(give, have)
    return given, have - given


def shortage(friends: int, per_friend: int, available: int) -> int:
    """Return how many toys are missing to give each friend ``per_friend``."""
    needed = friends * per_friend
    return max(needed - available, 0)


def lesson_lines() -> list[str]:
    """Return the lesson text, one line per entry."""
    total_toys = TOYS_HAVE + DOLLS + ROBOTS
    lines = [
        "🧸 เริ่มต้นโปรแกรมนับของเล่นของน้อง 🧸",
        "=========================================",
        "📖 โจทย์:",
        f"   น้องมีของเล่น: {TOYS_HAVE} ชิ้น",
        f"   เอาไปแจกให้เพื่อน: {TOYS_GIVE_AWAY} ชิ้น",
        "   ❓ น้องเหลือของเล่นกี่ชิ้น?",
        "",
        f"🪆 ตุ๊กตา: {DOLLS} ตัว",
        f"🤖 หุ่นยนต์: {ROBOTS} ตัว",
        f"🎯 ของเล่นทั้งหมด: {total_toys} ชิ้น",
    ]

    if TOYS_GIVE_AWAY > TOYS_HAVE:
        lines += [
            f"⚠️  คำเตือน: ของเล่นที่จะแจก ({TOYS_GIVE_AWAY}) มากกว่าที่มีอยู่ ({TOYS_HAVE})!",
            "   น้องไม่สามารถแจกของเล่นได้มากกว่าที่มี",
            f"   จะแจกได้เฉพาะ {TOYS_HAVE} ชิ้น (ทั้งหมดที่มี)",
        ]
    given, remaining = give_away(TOYS_HAVE, TOYS_GIVE_AWAY)

    lines += [
        "🧮 ขั้นตอนการคิด:",
        "   ของเล่นที่มี - ของเล่นที่แจก",
        f"   = {TOYS_HAVE} - {given}",
        f"   = {remaining} ชิ้น",
        "",
        "✅ คำตอบ:",
        f"   น้องเหลือของเล่น {remaining} ชิ้น",
        "",
        "🎨 ภาพประกอบ:",
        f"   ของเล่นเดิม: 🧸🚗🎲🧩🎮🧸🚁🎯 ({TOYS_HAVE} ชิ้น)",
        f"   แจกให้เพื่อน: 🧸🚗🎲 ({given} ชิ้น)",
        f"   เหลืออยู่:   🧩🎮🧸🚁🎯 ({remaining} ชิ้น)",
        "",
        f"🪆 ตุ๊กตา: {DOLLS} ตัว",
        f"🤖 หุ่นยนต์: {ROBOTS} ตัว",
        f"🎯 ของเล่นทั้งหมด: {total_toys} ชิ้น",
        "💡 ตัวอย่างเพิ่มเติม:",
    ]

    ex1_have, ex1_give = 15, 7
    ex1_remain = ex1_have - ex1_give
    lines += [
        f"   ถ้าน้องมีของเล่น {ex1_have} ชิ้น และแจกไป {ex1_give} ชิ้น",
        f"   จะเหลือ {ex1_have} - {ex1_give} = {ex1_remain} ชิ้น",
        "",
    ]
    if TOYS_HAVE >= given:
        lines.append("✅ ของเล่นพอแจก")
    else:
        lines.append(f"❌ ของเล่นไม่พอ! ขาดไป {given - TOYS_HAVE} ชิ้น")

    ex2_have, ex2_give = 5, 5
    ex2_remain = ex2_have - ex2_give
    danger_have, danger_give = 3, 5
    lines += [
        f"   ถ้าน้องมีของเล่น {ex2_have} ชิ้น และแจกไปหมด {ex2_give} ชิ้น",
        f"   จะเหลือ {ex2_have} - {ex2_give} = {ex2_remain} ชิ้น (ไม่เหลือเลย)",
        "",
        "🔄 เปรียบเทียบกับการบวก:",
        "   การบวก: เพิ่มจำนวน (เช่น ไข่ 4 + 2 = 6)",
        "   การลบ: ลดจำนวน (เช่น ของเล่น 8 - 3 = 5)",
        "   ข้อแตกต่าง: การลบต้องระวังไม่ให้ติดลบ!",
        "",
        "⚠️  กรณีที่ต้องระวัง:",
        f"   ถ้าน้องมีของเล่น {danger_have} ชิ้น แต่จะแจก {danger_give} ชิ้น",
        f"   จะได้ {danger_have} - {danger_give} = {danger_have - danger_give} (ผลลัพธ์เป็นลบ!)",
        "   ในชีวิตจริง: น้องไม่สามารถแจกของเล่นมากกว่าที่มีได้",
        "",
        "📚 สิ่งที่เรียนรู้:",
        "   1. การลบเลข (Subtraction): a - b = c",
        "   2. การตรวจสอบเงื่อนไข (if statement)",
        "   3. การจัดการกรณีพิเศษ (edge cases)",
        "   4. ความแตกต่างระหว่างการบวกและการลบ",
        "   5. การป้องกันผลลัพธ์ที่ไม่สมเหตุสมผล",
        "",
        "🧠 แบบฝึกหัดที่ 4: คำถามให้คิด",
    ]

    friends, per_friend, actual = 10, 2, 15
    lines += [
        f"   น้องอยากแจกของเล่นให้เพื่อน {friends} คน คนละ {per_friend} ชิ้น",
        f"   รวมต้องมีของเล่น: {friends * per_friend} ชิ้น",
    ]
    missing = shortage(friends, per_friend, actual)
    if missing == 0:
        lines.append(f"   ✅ ของเล่นเพียงพอ มีอยู่ {actual} ชิ้น")
    else:
        lines += [
            f"   ❌ ของเล่นไม่พอ! มีอยู่แค่ {actual} ชิ้น",
            f"   ขาดอีก {missing} ชิ้น",
        ]

    lines += [
        "",
        "🎉 จบโปรแกรมนับของเล่นของน้อง!",
        "📖 อ่านต่อในโปรเจคถัดไป: 03_multiplication_candies",
    ]
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print the subtraction lesson."""
    parser = argparse.ArgumentParser(
        prog="mathlessons-subtraction", description="Subtraction lesson with toys."
    )
    parser.parse_args(argv)
    for line in lesson_lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())