"""Quickstart example for pluralengine.

This example demonstrates plural category selection with CLDR data from
Babel, explicit precision, custom rule tables and error diagnostics.

Note: Plural categories are inputs to message selection ("1 file" versus
"2 files"); turning them into text is the job of a message formatter.
"""

from decimal import Decimal

from pluralengine import (
    EngineBuildError,
    OperandError,
    PluralOperands,
    PluralRules,
    PluralRuleType,
    RuleParseError,
    StaticRuleProvider,
    parse_rule,
    select_plural_category,
)

# Example 1: One-call selection
print("=" * 50)
print("Example 1: Select Plural Category")
print("=" * 50)

for count in (0, 1, 2, 5, 21):
    print(f"ru {count}: {select_plural_category(count, 'ru')}")
# Output: ru 0: many / ru 1: one / ru 2: few / ru 5: many / ru 21: one

print(f"ar 3: {select_plural_category(3, 'ar')}")
# Output: ar 3: few

# Example 2: Precision matters
print("\n" + "=" * 50)
print("Example 2: Visible Fraction Digits")
print("=" * 50)

print(select_plural_category("1", "en"))  # one
print(select_plural_category("1.0", "en"))  # other
print(select_plural_category(Decimal("1.50"), "en"))  # other
print(select_plural_category(1.0, "en", fraction_digits=0))  # one

print(PluralOperands.from_string("1.10"))
# Output: PluralOperands(n=Decimal('1.10'), i=1, v=2, w=1, f=10, t=1, c=0)

# Example 3: Ordinals
print("\n" + "=" * 50)
print("Example 3: Ordinal Rules")
print("=" * 50)

ordinal = PluralRules.create("en", PluralRuleType.ORDINAL)
suffixes = {"one": "st", "two": "nd", "few": "rd", "other": "th"}
print(", ".join(f"{n}{suffixes[ordinal.select_number(n)]}" for n in (1, 2, 3, 4, 11, 21, 102)))
# Output: 1st, 2nd, 3rd, 4th, 11th, 21st, 102nd

# Example 4: Custom rule tables
print("\n" + "=" * 50)
print("Example 4: Custom Rules")
print("=" * 50)

provider = StaticRuleProvider({
    "x-pirate": {"cardinal": {"one": "n = 1", "many": "n % 100 = 99"}},
})
pirate = PluralRules.create("x-pirate", provider=provider)
print(pirate.categories)
print(pirate.select_number(199))  # many

rule = parse_rule("n % 10 = 1 and n % 100 != 11 @integer 1, 21, 31, …")
print(rule.condition)
# Output: n % 10 = 1 and n % 100 != 11

# Example 5: Errors and diagnostics
print("\n" + "=" * 50)
print("Example 5: Diagnostics")
print("=" * 50)

try:
    parse_rule("n = 1 or x = 2")
except RuleParseError as e:
    assert e.diagnostic is not None
    print(e.diagnostic.format_error())

try:
    PluralRules.from_rules("xx", "cardinal", {"one": "n = 1", "few": "n in"})
except EngineBuildError as e:
    print(e)
    for category, error in e.errors.items():
        print(f"  {category}: {error.kind} at {error.position}")

try:
    select_plural_category(1.5, "en")
except OperandError as e:
    print(e)
