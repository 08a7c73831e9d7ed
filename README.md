# mathlessons

A set of short maths lessons for the console. Each lesson works through a
story problem step by step (parked cars, toys, candies, cookies, a shopping
bill, shapes), prints the reasoning and the answer, and shows a few more
examples. Two further commands cover checking input safely and a small
calculator with a history and a shop checkout.

The lesson text is in Thai.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the lessons

Each lesson is its own command. None of them takes options besides `--help`.

| Command                       | Lesson                                              |
|-------------------------------|-----------------------------------------------------|
| `mathlessons-addition`        | Adding: counting parked cars                        |
| `mathlessons-subtraction`     | Subtracting: giving toys away, spotting shortfalls  |
| `mathlessons-multiplication`  | Multiplying: bags of candies, times tables          |
| `mathlessons-division`        | Dividing: sharing cookies, quotient and remainder   |
| `mathlessons-shopping`        | A shopping bill with discount, VAT and a split      |
| `mathlessons-geometry`        | Areas and volumes: field, pool, box, cone, rai      |
| `mathlessons-validation`      | Handling bad input and impossible calculations      |
| `mathlessons-calculator`      | A walk through the calculator's menus and history   |

## Using it from Python

The arithmetic behind every lesson can be called directly.

```python
from mathlessons.addition import add_cars
from mathlessons.subtraction import give_away, shortage
from mathlessons.multiplication import times_table, share_candies
from mathlessons.division import share, exact_divisors
from mathlessons.shopping import Product, bill_total, apply_percentage_discount, apply_vat, split_payment

add_cars(8, 3)                 # 11
give_away(3, 5)                # (3, 0): nobody gives more than they have
shortage(10, 2, 15)            # 5 toys missing
times_table(8)                 # [(1, 8), (2, 16), ..., (10, 80)]
share(24, 6)                   # (4, 0): quotient and remainder
exact_divisors(30, 10)         # group sizes up to 10 that share 30 evenly

basket = [Product("แอปเปิ้ล", 6, 15.0), Product("กล้วย", 12, 8.0)]
subtotal = bill_total(basket)
after_discount = apply_percentage_discount(subtotal, 10.0)
with_vat = apply_vat(after_discount, 7.0)
each = split_payment(with_vat, 3)
```

`share` raises `ZeroDivisionError` when there is nobody to share with;
`share_candies` and `split_payment` raise `ValueError` for a count that is
not positive.

`mathlessons.geometry` has `Shape` with `rectangle_report`, `circle_report`
and `box_report`, each returning a dictionary of measurements and the lines
of a text box, plus `triangle_area`, `cone_volume` and `to_rai`
(1 rai = 1,600 m²).

Checks that can fail raise exceptions instead of returning error codes:

```python
from mathlessons.validation import safe_divide, validate_number, CalculationError

try:
    safe_divide(12, 0, "pizza for nobody")
except CalculationError as err:
    print(err.code)            # ErrorCode.DIVISION_BY_ZERO

validate_number("12.50", "price")   # 12.5
```

`validate_money` rejects negative amounts and amounts above one trillion and
rounds to two decimals; `calculate_interest` works out simple interest.

The calculator keeps a history of at most 50 entries:

```python
from mathlessons.calculator import Calculator, Operation, CartItem

calc = Calculator()
calc.perform(Operation.ADD, 25.5, 14.3)
calc.perform(Operation.SQRT, 64.0)
for entry in calc.recent_history(5):
    print(entry.id, entry.description)

bill = calc.checkout([CartItem(1, "น้ำดื่ม", 15.0, 2)], discount_percent=10.0, tax_rate=7.0)
print(bill["total"])
```

Refused input (division by zero, a negative square root and the like)
raises `CalculatorError`.

The lesson text itself is available as a list of lines from
`lesson_lines()` in the addition, subtraction, multiplication, division,
geometry and validation modules, and from `receipt_lines()` in the shopping
module, so it can be shown anywhere, not only on the console.

## What it does not do

- The commands print their lesson straight through; they do not pause
  between steps and do not ask the reader anything.
- `mathlessons-calculator` runs a fixed tour of its menus with set example
  numbers. It does not read menu choices or numbers from the keyboard.
- The calculator's history lives only in memory and is gone when the
  program ends.