"""Hand a token stream to another process — JSON round-trip."""

from owl import scan
from owl.serialization import tokens_from_json, tokens_to_json

result = scan('page { "Tokens can be serialized and restored." }')
if not result.ok:
    raise SystemExit(f"Scan failed: {result.error}")

json_str = tokens_to_json(result.tokens)
restored = tokens_from_json(json_str)

print("Original == restored:", list(result.tokens) == restored)
print("JSON length:", len(json_str), "chars")
