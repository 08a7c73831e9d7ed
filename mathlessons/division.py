"""Division lesson: sharing cookies among friends."""

from __future__ import annotations

import argparse

TOTAL_COOKIES = 24
NUMBER_OF_FRIENDS = 6
DIVISOR_CHECK_COOKIES = 30
DIVISOR_CHECK_LIMIT = 10


def share(total: int, people: int) -> tuple[int, int]:
    """Share ``total`` items among ``people``; return ``(each, remainder)``.

    Raises ZeroDivisionError when there is nobody to share with.
    """
    if people == 0:
        raise ZeroDivisionError("cannot divide by zero: nobody to share with")
    return divmod(total, people)


def exact_divisors(total: int, limit: int = 10) -> list[tuple[int, int]]:
    """Return ``(people, each)`` for every group size 1..``limit`` that divides ``total`` exactly."""
    return [(people, total // people) for people in range(1, limit + 1) if total % people == 0]


def _verdict(remainder: int) -> str:
    if remainder == 0:
        return "✅ หารลงตัว! ทุกคนได้เท่ากัน"
    return f"⚠️ หารไม่ลงตัว! เหลือ {remainder} ชิ้น"


def lesson_lines() -> list[str]:
    """Return the lesson text, one line per entry."""
    total, friends = TOTAL_COOKIES, NUMBER_OF_FRIENDS
    lines = [
        "🍪 เริ่มต้นโปรแกรมแบ่งคุกกี้ 🍪",
        "================================",
        "📖 โจทย์:",
        f"   มีคุกกี้: {total} ชิ้น",
        f"   จะแบ่งให้เพื่อน: {friends} คน",
        "   ❓ แต่ละคนได้คุกกี้กี่ชิ้น?",
        "",
    ]

    try:
        each, remainder = share(total, friends)
    except ZeroDivisionError:
        lines += [
            "❌ ข้อผิดพลาด: ไม่สามารถหารด้วยศูนย์ได้!",
            "   ในชีวิตจริง: ไม่มีเพื่อนมาแบ่งคุกกี้",
            f"   คุกกี้ทั้งหมด {total} ชิ้น จะเหลือไว้ทั้งหมด",
            "",
            "🎉 จบโปรแกรม!",
        ]
        return lines

    lines += [
        "🧮 ขั้นตอนการคิด:",
        "   คุกกี้ทั้งหมด ÷ จำนวนเพื่อน",
        f"   = {total} ÷ {friends}",
        f"   = {each} ชิ้นต่อคน",
    ]
    if remainder > 0:
        lines.append(f"   เศษที่เหลือ = {remainder} ชิ้น")
    lines += ["", "✅ คำตอบ:", f"   แต่ละคนได้คุกกี้ {each} ชิ้น"]
    if remainder > 0:
        lines.append(f"   มีคุกกี้เหลือ {remainder} ชิ้น (ไม่สามารถแบ่งได้เท่าๆ กัน)")
    else:
        lines.append("   แบ่งได้พอดี ไม่มีเหลือ")
    lines += [_verdict(remainder), ""]

    lines += [
        "🎨 ภาพประกอบการแบ่ง:",
        f"   คุกกี้ทั้งหมด: 🍪🍪🍪🍪🍪🍪🍪🍪🍪🍪🍪🍪 ({total} ชิ้น)",
        "",
    ]
    for person in range(1, friends + 1):
        lines += [f"   เพื่อนคนที่ {person}: ", f"🍪🍪🍪 ({each} ชิ้น)"]
    if remainder > 0:
        lines += ["   เหลือ: ", f"🍪 ({remainder} ชิ้น)"]
    lines += [_verdict(remainder), ""]

    lines.append(f"🔍 คุกกี้ {DIVISOR_CHECK_COOKIES} ชิ้น หารลงตัวกับ:")
    lines += [
        f"   ✅ {people} คน → คนละ {per} ชิ้น"
        for people, per in exact_divisors(DIVISOR_CHECK_COOKIES, DIVISOR_CHECK_LIMIT)
    ]

    lines.append("💡 ตัวอย่างเพิ่มเติม:")
    ex1_cookies, ex1_friends = 15, 3
    ex1_each, ex1_rem = share(ex1_cookies, ex1_friends)
    lines += [
        f"   คุกกี้ {ex1_cookies} ชิ้น แบ่งให้ {ex1_friends} คน",
        f"   = {ex1_cookies} ÷ {ex1_friends} = {ex1_each} ชิ้นต่อคน, เหลือ {ex1_rem} ชิ้น",
        "",
    ]
    ex2_cookies, ex2_friends = 13, 4
    ex2_each, ex2_rem = share(ex2_cookies, ex2_friends)
    lines += [
        f"   คุกกี้ {ex2_cookies} ชิ้น แบ่งให้ {ex2_friends} คน",
        f"   = {ex2_cookies} ÷ {ex2_friends} = {ex2_each} ชิ้นต่อคน, เหลือ {ex2_rem} ชิ้น",
        "   (หารไม่ลงตัว)",
        "",
        "⚠️  กรณีพิเศษ - หารด้วยศูนย์:",
        "   ถ้าไม่มีเพื่อนมาแบ่ง (หารด้วย 0)",
        "   ไม่สามารถคำนวณได้ในทางคณิตศาสตร์",
        "   ในชีวิตจริง: คุกกี้จะเหลือทั้งหมด",
        "",
    ]

    product = each * friends
    lines += [
        "🔄 ความสัมพันธ์กับการคูณ:",
        f"   การหาร: {total} ÷ {friends} = {each}",
        f"   การคูณ: {each} × {friends} = {product}",
    ]
    if remainder > 0:
        lines.append(f"   บวกเศษ: {product} + {remainder} = {total}")
    lines += [
        "   การหารและการคูณเป็นการดำเนินการตรงข้ามกัน",
        "",
        "📊 สรุปการดำเนินการทั้งหมด:",
        "   การบวก (+): เพิ่มจำนวน",
        "   การลบ (-): ลดจำนวน",
        "   การคูณ (×): บวกซ้ำๆ หลายชุด",
        "   การหาร (÷): แบ่งออกเป็นกลุ่มเท่าๆ กัน",
        "",
        "🎓 แนวคิดขั้นสูง:",
        "   1. การหารจะได้ผลหาร (quotient) และเศษ (remainder)",
        "   2. ในภาษา C:",
        "      ผลหาร = a / b",
        "      เศษ = a % b",
        "   3. การตรวจสอบการหารด้วยศูนย์เป็นสิ่งสำคัญ",
        "   4. การหารด้วย 1 จะได้ตัวเลขเดิม",
        "   5. การหารตัวเลขด้วยตัวมันเองจะได้ 1",
        "",
        "📚 สิ่งที่เรียนรู้:",
        "   1. การหารเลข (Division): a ÷ b = c",
        "   2. การใช้ Modulo operator (%) หาเศษ",
        "   3. การตรวจสอบการหารด้วยศูนย์",
        "   4. ความแตกต่างระหว่างหารลงตัวและไม่ลงตัว",
        "   5. ความสัมพันธ์ระหว่างการหารและการคูณ",
        "   6. การจัดการกรณีพิเศษ (Error Handling)",
        "",
        "🎉 จบโปรแกรมแบ่งคุกกี้!",
        "📖 อ่านต่อในโปรเจคถัดไป: 05_mixed_shopping",
    ]
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print the division lesson."""
    parser = argparse.ArgumentParser(
        prog="mathlessons-division", description="Division lesson with cookies."
    )
    parser.parse_args(argv)
    for line in lesson_lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())