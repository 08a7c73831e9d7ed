"""Geometry lesson: areas, perimeters and volumes of everyday shapes."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

PI = 3.14159265359
SQUARE_METERS_TO_RAI = 1600.0

_TOP = "╔══════════════════════════════════════╗"
_MID = "╠══════════════════════════════════════╣"
_BOTTOM = "╚══════════════════════════════════════╝"


@dataclass(frozen=True)
class Shape:
    """A named shape; ``length`` doubles as the radius of round shapes."""

    name: str
    length: float
    width: float = 0.0
    height: float = 0.0


def rectangle_report(shape: Shape) -> tuple[dict[str, float], list[str]]:
    """Measure a rectangle; return its area, perimeter and size in rai with a text box."""
    area = shape.length * shape.width
    perimeter = 2 * (shape.length + shape.width)
    rai = area / SQUARE_METERS_TO_RAI
    lines = [
        _TOP,
        f"║          {shape.name}           ║",
        _MID,
        f"║ 📏 ความยาว: {shape.length:.2f} เมตร",
        f"║ 📏 ความกว้าง: {shape.width:.2f} เมตร",
        f"║ 📐 พื้นที่: {shape.length:.2f} × {shape.width:.2f} = {area:.2f} ตร.ม.",
        f"║ 🔄 ปริเมตร: 2×({shape.length:.0f}+{shape.width:.0f}) = {perimeter:.2f} ม.",
        f"║ 🌾 เท่ากับ: {rai:.4f} ไร่",
        _BOTTOM,
    ]
    return {"area": area, "perimeter": perimeter, "rai": rai}, lines


def circle_report(shape: Shape) -> tuple[dict[str, float], list[str]]:
    """Measure a round pool of radius ``length`` and depth ``height``."""
    radius = shape.length
    surface_area = PI * radius * radius
    circumference = 2 * PI * radius
    volume = surface_area * shape.height
    lines = [
        _TOP,
        f"║          {shape.name}            ║",
        _MID,
        f"║ 📏 รัศมี: {radius:.2f} เมตร",
        f"║ 📏 ความลึก: {shape.height:.2f} เมตร",
        f"║ 🌊 พื้นที่ผิวน้ำ: π × {radius:.0f}² = {surface_area:.2f} ตร.ม.",
        f"║ ⭕ เส้นรอบวง: 2π × {radius:.0f} = {circumference:.2f} ม.",
        f"║ 💧 ปริมาตรน้ำ: {surface_area:.2f} × {shape.height:.2f} = {volume:.2f} ลบ.ม.",
        _BOTTOM,
    ]
    values = {
        "surface_area": surface_area,
        "circumference": circumference,
        "volume": volume,
    }
    return values, lines


def box_report(shape: Shape) -> tuple[dict[str, float], list[str]]:
    """Measure a box in centimetres; return volume, surface area and litres."""
    volume = shape.length * shape.width * shape.height
    surface_area = 2 * (
        shape.length * shape.width
        + shape.width * shape.height
        + shape.length * shape.height
    )
    litres = volume / 1000.0
    lines = [
        _TOP,
        f"║          {shape.name}          ║",
        _MID,
        f"║ 📏 ความยาว: {shape.length:.2f} ซม.",
        f"║ 📏 ความกว้าง: {shape.width:.2f} ซม.",
        f"║ 📏 ความสูง: {shape.height:.2f} ซม.",
        f"║ 📦 ปริมาตร: {shape.length:.0f}×{shape.width:.0f}×{shape.height:.0f}"
        f" = {volume:.2f} ลบ.ซม.",
        f"║ 🎀 พื้นที่ผิว: {surface_area:.2f} ตร.ซม.",
        f"║ 📐 เท่ากับ: {litres:.6f} ลิตร",
        _BOTTOM,
    ]
    return {"volume": volume, "surface_area": surface_area, "litres": litres}, lines


def triangle_area(base: float, height: float) -> float:
    """Return the area of a triangle with the given base and height."""
    return 0.5 * base * height


def cone_volume(radius: float, height: float) -> float:
    """Return the volume of a cone with the given base radius and height."""
    return (1.0 / 3.0) * PI * radius * radius * height


def to_rai(length: float, width: float) -> float:
    """Return the area of a ``length`` by ``width`` metre plot in rai."""
    return length * width / SQUARE_METERS_TO_RAI


def _comparison_lines() -> list[str]:
    return [
        "",
        "🔍 การเปรียบเทียบผลลัพธ์:",
        "╔════════════════════════════════════╗",
        "║  สนามฟุตบอล vs สระน้ำ vs กล่อง    ║",
        "╠════════════════════════════════════╣",
        "║ 🏟️ สนาม: ใหญ่ที่สุด (6,000 ตร.ม.)  ║",
        "║ 🏊‍♀️ สระ: กลาง (78.54 ตร.ม.)       ║",
        "║ 🎁 กล่อง: เล็กที่สุด (300 ลบ.ซม.)  ║",
        "╚════════════════════════════════════╝",
    ]


def _math_fact_lines() -> list[str]:
    return [
        "",
        "📚 ความรู้ทางคณิตศาสตร์:",
        "╔═══════════════════════════════════════╗",
        "║           สูตรคณิตศาสตร์             ║",
        "╠═══════════════════════════════════════╣",
        "║ 📐 สี่เหลี่ยม: พื้นที่ = ยาว × กว้าง   ║",
        "║ ⭕ วงกลม: พื้นที่ = π × r²           ║",
        "║ 📦 ทรงผีเสื้อ: ปริมาตร = ย×ก×ส       ║",
        "║ 💡 π (pi) ≈ 3.14159                  ║",
        "║ 🌾 1 ไร่ = 1,600 ตารางเมตร          ║",
        "╚═══════════════════════════════════════╝",
    ]


def _triangle_bonus_lines() -> list[str]:
    base, height = 10.0, 8.0
    side1, side2, side3 = 10.0, 8.0, 6.0
    area = triangle_area(base, height)
    perimeter = side1 + side2 + side3
    return [
        "",
        "🎯 โบนัส: สามเหลี่ยม",
        "╔═══════════════════════════════════════╗",
        "║         สามเหลี่ยมมุมฉาก             ║",
        "╠═══════════════════════════════════════╣",
        f"║ 📏 ฐาน: {base:.2f} ซม.",
        f"║ 📏 สูง: {height:.2f} ซม.",
        f"║ 📐 พื้นที่: ½×{base:.0f}×{height:.0f} = {area:.2f} ตร.ซม.",
        f"║ 🔄 ปริเมตร: {side1:.0f}+{side2:.0f}+{side3:.0f} = {perimeter:.2f} ซม.",
        "╚═══════════════════════════════════════╝",
    ]


def _triangle_area_lines(base: float, height: float) -> list[str]:
    area = triangle_area(base, height)
    return [
        "",
        "📐 พื้นที่สามเหลี่ยม:",
        _TOP,
        f"║ ฐาน: {base:.2f} เมตร",
        f"║ สูง: {height:.2f} เมตร",
        f"║ ➕ พื้นที่: ½ × {base:.2f} × {height:.2f} = {area:.2f} ตร.ม.",
        f"║ 🌾 เท่ากับ: {area / SQUARE_METERS_TO_RAI:.6f} ไร่",
        _BOTTOM,
    ]


def _cone_lines(radius: float, height: float) -> list[str]:
    base_area = PI * radius * radius
    volume = cone_volume(radius, height)
    return [
        "",
        "🍦 ปริมาตรทรงกรวย:",
        _TOP,
        f"║ รัศมี: {radius:.2f} เมตร",
        f"║ สูง: {height:.2f} เมตร",
        f"║ 📐 พื้นที่ฐาน: π × {radius:.2f}² = {base_area:.2f} ตร.ม.",
        f"║ 💧 ปริมาตร: (1/3) × {base_area:.2f} × {height:.2f} = {volume:.2f} ลบ.ม.",
        _BOTTOM,
    ]


def _rai_lines(length: float, width: float) -> list[str]:
    return [
        "",
        "🔁 แปลงหน่วยพื้นที่:",
        _TOP,
        f"║ ความยาว: {length:.2f} เมตร",
        f"║ ความกว้าง: {width:.2f} เมตร",
        f"║ ➕ พื้นที่: {length * width:.2f} ตร.ม.",
        f"║ 🌾 เท่ากับ: {to_rai(length, width):.6f} ไร่",
        _BOTTOM,
    ]


def lesson_lines() -> list[str]:
    """Return the lesson text, one line per entry."""
    football_field = Shape("สนามฟุตบอล", 100.0, 60.0, 0.0)
    swimming_pool = Shape("สระน้ำกลม", 5.0, 0.0, 2.0)
    gift_box = Shape("กล่องของขวัญ", 20.0, 15.0, 10.0)

    lines = [
        "🚀 เริ่มต้นโปรแกรมคณิตศาสตร์ขั้นสูง!",
        "📐 การคำนวณพื้นที่และปริมาตร",
        "",
        "   🏟️     🏊‍♀️     🎁",
        " ┌─────┐  ╭─────╮  ┌─────┐",
        " │ ⚽  │  │ 💧💧 │  │ 🎀  │",
        " │     │  │     │  │     │",
        " └─────┘  ╰─────╯  └─────┘",
        "",
    ]
    lines += rectangle_report(football_field)[1]
    lines += circle_report(swimming_pool)[1]
    lines += box_report(gift_box)[1]
    lines += _comparison_lines()
    lines += _math_fact_lines()
    lines += _triangle_bonus_lines()
    lines += _triangle_area_lines(12.0, 7.0)
    lines += _cone_lines(3.0, 6.0)
    lines += _rai_lines(40.0, 40.0)
    lines += [
        "",
        "✅ เสร็จสิ้นการคำนวณทั้งหมด!",
        "🎓 ได้เรียนรู้: คณิตศาสตร์ขั้นสูง, struct, #define, และฟังก์ชันคณิตศาสตร์",
    ]
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print the geometry lesson."""
    parser = argparse.ArgumentParser(
        prog="mathlessons-geometry", description="Areas and volumes lesson."
    )
    parser.parse_args(argv)
    for line in lesson_lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())