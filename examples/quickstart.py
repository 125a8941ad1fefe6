"""Quickstart example for jsonwalk.

Validates a few JSON texts and prints the diagnostics for the ones that
are rejected, in each of the three output formats.

Python 3.13+.
"""

from jsonwalk import JsonSyntaxError, JsonValidator, is_valid, validate
from jsonwalk.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Accept or reject
print("=" * 50)
print("Example 1: Accept or Reject")
print("=" * 50)

for text in ['{"name": "jsonwalk", "tags": ["json", "cursor"]}', "[1, 2,]", "1 2"]:
    print(f"{text!r:55} -> {is_valid(text)}")
# Output:
# '{"name": "jsonwalk", "tags": ["json", "cursor"]}'     -> True
# '[1, 2,]'                                               -> False
# '1 2'                                                   -> False

# Example 2: Kind of the top-level value
print("\n" + "=" * 50)
print("Example 2: Top-Level Kind")
print("=" * 50)

for text in ["null", "3.25e2", '"text"', "[]", "{}"]:
    result = validate(text)
    print(f"{text:8} -> {result.kind}")
# Output:
# null     -> null
# 3.25e2   -> number
# ...

# Example 3: Diagnostics
print("\n" + "=" * 50)
print("Example 3: Diagnostics")
print("=" * 50)

broken = '{\n  "a": [1, 2],\n  "b": tru\n}'
result = validate(broken)
for output_format in OutputFormat:
    formatter = DiagnosticFormatter(output_format=output_format)
    print(f"--- {output_format} ---")
    print(formatter.format_all(result.errors))
# Output (rust):
# error[UNEXPECTED_BYTE]: Unexpected byte 't' at position 24
#   --> line 3, column 8
#   = help: Check for trailing commas, missing colons, or invalid escapes

# Example 4: Limits and the raising API
print("\n" + "=" * 50)
print("Example 4: Limits")
print("=" * 50)

shallow = JsonValidator(max_nesting_depth=3)
print(shallow.validate("[[[1]]]").is_valid)
# Output: True
print(shallow.validate("[[[[1]]]]").errors[0].message)
# Output: Maximum nesting depth (3) exceeded

try:
    shallow.check("[[[[1]]]]")
except JsonSyntaxError as e:
    print(f"check() raised: {e.diagnostic}")
