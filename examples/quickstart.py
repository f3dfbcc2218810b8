"""Quickstart example for arblexengine.

This example demonstrates message analysis and cross-locale aggregation
of ARB documents held in memory.

Note: Examples print aggregation issues for visibility. In production,
collect them and decide at the build level whether any is blocking.
"""

from arblexengine import (
    AggregatorConfig,
    KeyAggregator,
    extract_placeholders,
    get_icu_segments,
    get_ordered_placeholders,
    parse_document,
    validate_icu_syntax,
    validate_module,
)

# Example 1: Placeholders
print("=" * 50)
print("Example 1: Placeholder Extraction")
print("=" * 50)

print(sorted(extract_placeholders("Hello {name}")))
# Output: ['name']

print(sorted(extract_placeholders("{count, plural, =0{none} other{{count} items}}")))
# Output: ['count']

# Example 2: Compound messages
print("\n" + "=" * 50)
print("Example 2: ICU Segments")
print("=" * 50)

message = "{gender, select, male{He} other{They}} has {count, plural, one{1 item} other{{count} items}}"
for segment in get_icu_segments(message):
    print(f"{segment.variable:<8} {segment.type:<8} [{segment.start}:{segment.end}] {segment.raw}")
# Output:
# gender   select   [0:38] {gender, select, male{He} other{They}}
# count    plural   [43:92] {count, plural, one{1 item} other{{count} items}}

# Example 3: Validation
print("\n" + "=" * 50)
print("Example 3: ICU Validation")
print("=" * 50)

for text in ("{count, plural, other{x}}", "{count, plural, =0{x}}", "{count, plural, other{x}"):
    result = validate_icu_syntax(text)
    print(f"{text!r}: {'valid' if result.valid else result.error}")

# Example 4: Aggregation
print("\n" + "=" * 50)
print("Example 4: Key Aggregation")
print("=" * 50)

en = parse_document("""{
  "@@locale": "en",
  "@@context": "cart",
  "itemCount": "{count, plural, =0{Empty} one{1 item} other{{count} items}}",
  "greeting": "Hi {name}, you owe {amount}",
  "@greeting": {
    "description": "Header greeting",
    "placeholders": {"amount": {"type": "double", "format": "currency"}, "name": {}}
  }
}""")
de = parse_document("""{
  "@@locale": "de",
  "@@context": "cart",
  "greeting": "Hallo {name}, Sie schulden {amount}"
}""")

aggregator = KeyAggregator(AggregatorConfig(default_locale="en"))
module, issues = aggregator.aggregate_module("cart", [de, en])

for key in module.keys:
    print(f"{key.key}: {key.translations}")
    print(f"  arguments: {key.ordered_placeholders('en')}")
    print(f"  missing:   {key.missing_locales(module.locales)}")

print(get_ordered_placeholders("Hi {name}, you owe {amount}"))
# Output: ('name', 'amount')

print(validate_module(module).format())
