"""Tests for household service."""

import random
from uuid import uuid4

import pytest

from dinner_planner.domain.households import ROLE_MEMBER, ROLE_OWNER
from dinner_planner.services.households import HouseholdService
from tests.conftest import InMemoryHouseholdRepository


def test_create_household_adds_owner_member() -> None:
    repository = InMemoryHouseholdRepository()
    service = HouseholdService(repository, rng=random.Random(5))
    owner_id = uuid4()

    household = service.create_household(owner_id, " Smiths ", " Alex ")

    assert household.name == "Smiths"
    assert len(household.invite_code) == 6
    assert household.invite_code.isalnum()
    assert household.invite_code == household.invite_code.upper()
    assert [(m.user_id, m.display_name, m.role) for m in repository.members] == [
        (owner_id, "Alex", ROLE_OWNER)
    ]


def test_create_household_rolls_back_when_membership_fails() -> None:
    repository = InMemoryHouseholdRepository(fail_add_member=True)
    service = HouseholdService(repository)

    with pytest.raises(RuntimeError):
        service.create_household(uuid4(), "Smiths", "Alex")

    assert repository.households == {}


def test_join_household_by_invite_code() -> None:
    repository = InMemoryHouseholdRepository()
    service = HouseholdService(repository)
    household = service.create_household(uuid4(), "Smiths", "Alex")
    user_id = uuid4()

    joined = service.join_household(user_id, household.invite_code.lower(), "Sam")
    service.join_household(user_id, household.invite_code, "Sam")

    assert joined == household
    assert service.is_member(household.id, user_id)
    roles = [m.role for m in service.list_members(household.id)]
    assert roles == [ROLE_OWNER, ROLE_MEMBER]


def test_join_with_unknown_code_returns_none() -> None:
    service = HouseholdService(InMemoryHouseholdRepository())

    assert service.join_household(uuid4(), "NOPE00", "Sam") is None
