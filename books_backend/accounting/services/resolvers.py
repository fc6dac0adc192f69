# accounting/services/resolvers.py

"""
REFERENCE RESOLVERS

Answers ONE question for the conversion pipeline:
"Which contact / product / account / tax does this input line mean?"

Two interchangeable strategies:
- NaturalKeyResolver: by name (contact, product, account) and by
  percentage value within the document side (tax)
- IdResolver: by primary key

Design goals:
- deterministic (ambiguous tax values pick the lowest id)
- hard-fail on missing setup: NotFoundError(entity, key)
- the pipeline only depends on the ReferenceResolver interface
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from django.db.models import Q

from accounting.models import Account
from accounting.services.exceptions import NotFoundError
from contacts.models import Contact
from products.models import Product, Tax


class ReferenceResolver:
    def contact(self, key) -> Contact:
        raise NotImplementedError

    def product(self, key) -> Product:
        raise NotImplementedError

    def account(self, key) -> Account:
        raise NotImplementedError

    def tax(self, key, *, side: str) -> Tax:
        raise NotImplementedError


def _scope_filter(side: str) -> Q:
    return Q(scope=side) | Q(scope=Tax.SCOPE_BOTH)


class NaturalKeyResolver(ReferenceResolver):
    def contact(self, key) -> Contact:
        name = (str(key) if key is not None else "").strip()
        contact = Contact.objects.filter(name=name).first() if name else None
        if contact is None:
            raise NotFoundError("contact", key)
        return contact

    def product(self, key) -> Product:
        name = (str(key) if key is not None else "").strip()
        product = Product.objects.filter(name=name).first() if name else None
        if product is None:
            raise NotFoundError("product", key)
        return product

    def account(self, key) -> Account:
        name = (str(key) if key is not None else "").strip()
        account = Account.objects.filter(name=name).first() if name else None
        if account is None:
            raise NotFoundError("account", key)
        return account

    def tax(self, key, *, side: str) -> Tax:
        try:
            value = Decimal(str(key))
        except (InvalidOperation, ValueError) as exc:
            raise NotFoundError("tax", key) from exc

        tax = (
            Tax.objects.filter(
                _scope_filter(side),
                computation_method=Tax.METHOD_PERCENTAGE,
                value=value,
            )
            .order_by("id")
            .first()
        )
        if tax is None:
            raise NotFoundError("tax", key)
        return tax


class IdResolver(ReferenceResolver):
    @staticmethod
    def _get(model, entity: str, key):
        try:
            pk = int(key)
        except (TypeError, ValueError) as exc:
            raise NotFoundError(entity, key) from exc

        obj = model.objects.filter(pk=pk).first()
        if obj is None:
            raise NotFoundError(entity, key)
        return obj

    def contact(self, key) -> Contact:
        return self._get(Contact, "contact", key)

    def product(self, key) -> Product:
        return self._get(Product, "product", key)

    def account(self, key) -> Account:
        return self._get(Account, "account", key)

    def tax(self, key, *, side: str) -> Tax:
        try:
            pk = int(key)
        except (TypeError, ValueError) as exc:
            raise NotFoundError("tax", key) from exc

        tax = Tax.objects.filter(_scope_filter(side), pk=pk).first()
        if tax is None:
            raise NotFoundError("tax", key)
        return tax
