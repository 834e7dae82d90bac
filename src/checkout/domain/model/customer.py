"""Customer aggregate.

The placement workflow only needs to know that a customer exists;
name and email matter to the people managing the directory.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Customer:

    id: str
    name: str
    email: str
