"""Tests for the view contract and its mixin."""

from __future__ import annotations

from uuid import UUID

import pytest

from tests.helpers.fakes import FakeDialog, NotAView
from viewdeck.errors import MissingViewManagerError
from viewdeck.views.contract import ViewContract

pytestmark = pytest.mark.unit


class TestViewMixin:
    def test_identity_is_stable_uuid(self):
        view = FakeDialog()
        assert isinstance(view.identity, UUID)
        assert view.identity == view.identity

    def test_identities_are_unique(self):
        assert FakeDialog().identity != FakeDialog().identity

    def test_missing_manager_fails_fast(self):
        view = FakeDialog()
        with pytest.raises(MissingViewManagerError, match="FakeDialog"):
            _ = view.view_manager

    def test_error_names_component(self):
        view = FakeDialog()
        with pytest.raises(MissingViewManagerError) as exc_info:
            _ = view.view_manager
        assert exc_info.value.component is view


class TestViewContract:
    def test_mixin_satisfies_contract(self):
        assert isinstance(FakeDialog(), ViewContract)

    def test_plain_object_does_not(self):
        assert not isinstance(NotAView(), ViewContract)

    def test_screens_implement_contract(self):
        from viewdeck.ui.modals import YesNoDialog
        from viewdeck.ui.screens import CounterView

        view = CounterView()
        assert isinstance(view, ViewContract)
        assert isinstance(YesNoDialog(), ViewContract)
        with pytest.raises(MissingViewManagerError):
            _ = view.view_manager
