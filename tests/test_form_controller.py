"""Tests for the form controller."""

import random
import re
from unittest.mock import AsyncMock, MagicMock

import pytest

from jobboard.controllers.form import FormController
from jobboard.controllers.values import EMPTY, FileRef, Flag, Text, text_of


def simple_login_validator(values):
    errors = {}
    email = text_of(values["email"])
    if not email:
        errors["email"] = "required"
    elif not re.search(r"\S+@\S+\.\S+", email):
        errors["email"] = "invalid"
    if not text_of(values["password"]):
        errors["password"] = "required"
    return errors


def make_form(on_submit=None, validate=simple_login_validator, initial=None):
    return FormController(
        initial if initial is not None else {"email": "", "password": ""},
        validate,
        on_submit or AsyncMock(),
    )


class TestSubmission:
    @pytest.mark.asyncio
    async def test_login_scenario(self):
        on_submit = AsyncMock()
        form = make_form(on_submit)

        form.handle_change("email", "bad")
        form.handle_change("password", "")
        submitted = await form.handle_submit()

        assert submitted is False
        assert form.errors == {"email": "invalid", "password": "required"}
        on_submit.assert_not_called()

        form.handle_change("email", "a@b.com")
        form.handle_change("password", "x")
        submitted = await form.handle_submit()

        assert submitted is True
        assert form.errors == {}
        on_submit.assert_awaited_once_with({"email": Text("a@b.com"), "password": Text("x")})

    @pytest.mark.asyncio
    async def test_never_submits_invalid_values(self):
        rng = random.Random(1234)
        emails = ["", "bad", "a@b", "a@b.com", "user@example.org", "  ", "@.x"]
        passwords = ["", "x", "secret"]

        for _ in range(200):
            on_submit = AsyncMock()
            form = make_form(on_submit)
            form.handle_change("email", rng.choice(emails))
            form.handle_change("password", rng.choice(passwords))
            if rng.random() < 0.5:
                form.handle_blur(rng.choice(["email", "password"]))

            expected = simple_login_validator(form.values)
            submitted = await form.handle_submit()

            assert submitted is (not expected)
            assert form.errors == expected
            assert on_submit.await_count == (0 if expected else 1)

    @pytest.mark.asyncio
    async def test_submit_marks_all_fields_touched(self):
        form = make_form()
        await form.handle_submit()
        assert form.touched == {"email", "password"}

    @pytest.mark.asyncio
    async def test_is_submitting_only_during_validation(self):
        seen = []

        def validate(values):
            seen.append(form.is_submitting)
            return {}

        form = make_form(validate=validate)
        assert form.is_submitting is False
        await form.handle_submit()
        assert seen == [True]
        assert form.is_submitting is False

    @pytest.mark.asyncio
    async def test_sync_submit_callback(self):
        on_submit = MagicMock(return_value=None)
        form = make_form(on_submit)
        form.handle_change("email", "a@b.com")
        form.handle_change("password", "x")

        assert await form.handle_submit() is True
        on_submit.assert_called_once()

    @pytest.mark.asyncio
    async def test_submit_callback_errors_propagate(self):
        form = make_form(AsyncMock(side_effect=RuntimeError("server down")))
        form.handle_change("email", "a@b.com")
        form.handle_change("password", "x")

        with pytest.raises(RuntimeError, match="server down"):
            await form.handle_submit()
        assert form.is_submitting is False
        assert form.errors == {}


class TestTouchedErrors:
    def test_no_errors_before_any_blur(self):
        form = make_form()
        form.handle_change("email", "bad")
        assert form.errors == {}

    def test_blur_shows_only_touched_fields(self):
        form = make_form()
        form.handle_blur("email")
        assert form.errors == {"email": "required"}
        assert "password" not in form.errors

    def test_change_revalidates_touched_fields(self):
        form = make_form()
        form.handle_blur("email")
        form.handle_change("email", "bad")
        assert form.errors == {"email": "invalid"}

        form.handle_change("email", "a@b.com")
        assert form.errors == {}

    def test_change_to_untouched_field_does_not_surface_its_error(self):
        form = make_form()
        form.handle_blur("email")
        form.handle_change("password", "")
        assert "password" not in form.errors

    @pytest.mark.asyncio
    async def test_all_fields_eligible_after_submit(self):
        form = make_form()
        await form.handle_submit()
        assert set(form.errors) == {"email", "password"}

        form.handle_change("password", "x")
        assert form.errors == {"email": "required"}


class TestValues:
    def test_checkbox_stores_checked_state(self):
        form = make_form(validate=lambda values: {}, initial={"is_active": True})
        form.handle_change("is_active", "on", input_type="checkbox", checked=False)
        assert form.values["is_active"] == Flag(False)

    def test_text_stored_without_coercion(self):
        form = make_form(validate=lambda values: {}, initial={"salary_min": ""})
        form.handle_change("salary_min", "50000")
        assert form.values["salary_min"] == Text("50000")

    def test_file_change_keeps_first_file(self):
        form = make_form(validate=lambda values: {}, initial={"cv": None})
        form.handle_file_change("cv", ["first.pdf", "second.pdf"])
        assert form.values["cv"] == FileRef("first.pdf")

    def test_empty_file_selection_keeps_previous_value(self):
        form = make_form(validate=lambda values: {}, initial={"cv": None})
        form.handle_file_change("cv", [])
        assert form.values["cv"] == EMPTY

        form.handle_file_change("cv", ["resume.pdf"])
        form.handle_file_change("cv", [])
        assert form.values["cv"] == FileRef("resume.pdf")

    def test_set_value(self):
        form = make_form()
        form.set_value("email", "a@b.com")
        assert form.values["email"] == Text("a@b.com")
        assert form.plain_values == {"email": "a@b.com", "password": ""}

    @pytest.mark.asyncio
    async def test_reset_restores_initial_snapshot(self):
        initial = {"email": "", "password": "", "remember": False}
        form = make_form(initial=initial)
        snapshot = dict(form.values)

        form.handle_change("email", "a@b.com")
        form.handle_change("password", "pw")
        form.handle_change("remember", "", input_type="checkbox", checked=True)
        form.handle_blur("email")
        await form.handle_submit()

        form.reset_form()

        assert form.values == snapshot
        assert form.plain_values == initial
        assert form.errors == {}
        assert form.touched == set()
        assert form.is_submitting is False
