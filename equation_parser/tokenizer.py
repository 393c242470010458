"""Splits an expression string into value and operator substrings."""

import re
from typing import Iterator

# Maximal runs of ASCII digits and decimal points; no sign
VALUE_PATTERN = re.compile(r'[\d.]+', re.ASCII)


def tokenize(text: str) -> Iterator[str]:
  """
  Yield tokens in source order.

  Every numeric run is a token, and so is the stripped text around and
  between runs when it is not empty. Nothing is validated here.
  """
  index = 0
  for match in VALUE_PATTERN.finditer(text):
    between = text[index:match.start()].strip()
    if between:
      yield between
    yield match.group()
    index = match.end()

  trailing = text[index:].strip()
  if trailing:
    yield trailing
