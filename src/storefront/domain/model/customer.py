"""Customer aggregate."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Customer:
    """A registered customer.

    Orders only need the ``id``; name and email belong to customer
    management.
    """

    id: str
    name: str
    email: str
