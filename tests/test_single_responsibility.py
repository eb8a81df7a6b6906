# tests/test_single_responsibility.py
"""
Tests for the Single Responsibility illustration.
"""

import pytest

from solid_principles.core import Transcript
from solid_principles.principles.single_responsibility import (
    EXAMPLE,
    EmailService,
    User,
    UserManager,
    UserReportFormatter,
    UserRepository,
    run_adherence,
    run_violation,
)

pytestmark = pytest.mark.tier1


def test_user_record_holds_name_and_age():
    user = User("Bob", 42)
    assert user.name == "Bob"
    assert user.age == 42


def test_user_manager_does_everything(out):
    manager = UserManager("Alice", 30)

    manager.save(out)
    manager.send_email(out, "hi")

    assert manager.generate_report() == "User report: Alice, 30 years old"
    assert out.lines == [
        "Saving user Alice to the database",
        "Sending email to Alice: hi",
    ]


def test_each_collaborator_has_one_job(out):
    user = User("Alice", 30)

    UserRepository().save(user, out)
    EmailService().send(user, "hi", out)

    assert UserReportFormatter().format(user) == "User report: Alice, 30 years old"
    assert out.lines == [
        "Saving user Alice to the database",
        "Sending email to Alice: hi",
    ]


def test_both_drivers_produce_the_same_behaviour(out):
    """Refactoring for SRP must not change what the user observes."""
    other = Transcript()
    run_violation(out)
    run_adherence(other)

    assert out.lines == other.lines
    assert len(out) == 3


def test_example_metadata():
    assert EXAMPLE.letter == "S"
    assert EXAMPLE.violation.members == (UserManager,)
    assert User in EXAMPLE.adherence.members
    assert "srp" in EXAMPLE.aliases
