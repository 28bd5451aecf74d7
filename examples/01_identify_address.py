#!/usr/bin/env python3
"""
Example 01: Identify addresses and public keys.

Prints every chain an input could belong to, its canonical form, and for
public keys the address derived on each chain.

Usage:
    python examples/01_identify_address.py
    python examples/01_identify_address.py 1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa
"""

import sys

from chain_identify import IdentificationError, identify

inputs = [
    "0xd8da6bf26964af9d7eed9e03e53415d37aa96045",  # EVM, no checksum
    "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa",  # Bitcoin P2PKH
    "cosmos1w508d6qejxtdg4y5r3zarvary0c5xw7k6ah60c",
    "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798",  # secp256k1 key
    "not_an_address",
]

if len(sys.argv) > 1:
    inputs = sys.argv[1:]

for text in inputs:
    print(f"Input: {text[:40]}{'...' if len(text) > 40 else ''}")
    try:
        result = identify(text)
    except IdentificationError as e:
        print(f"  Error: {e}")
        print()
        continue

    print(f"  Normalized: {result.normalized}")
    for candidate in result.candidates:
        line = f"  {candidate.chain:<16} {candidate.confidence:.2f}"
        if candidate.derived_address:
            line += f"  {candidate.derived_address}"
        print(line)
    print()
