"""Tests for error codes carried by exceptions."""

from exceptions import ConcurrentUpdate, ErrorCode, InvalidGoal, NotFoundError, PlanNotFound, ValidationError


def test_to_dict():
    e = InvalidGoal("bad goal", {"goal": "maintain"})
    assert e.to_dict() == {"code": "INVALID_GOAL", "message": "bad goal", "details": {"goal": "maintain"}}
    assert str(e) == "bad goal"


def test_hierarchy():
    assert isinstance(InvalidGoal("x"), ValidationError)
    assert isinstance(PlanNotFound("x"), NotFoundError)
    assert PlanNotFound("x").code is ErrorCode.PLAN_NOT_FOUND
    assert PlanNotFound("x").details == {}


def test_concurrent_update_is_not_a_validation_error():
    e = ConcurrentUpdate("try again", {"date": "2024-05-01"})
    assert not isinstance(e, ValidationError)
    assert e.to_dict()["code"] == "CONCURRENT_UPDATE"
