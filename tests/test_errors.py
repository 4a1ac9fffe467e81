from anticheat.errors import ControllerError, FailedPreconditionError, InternalError


def test_internal_error_is_controller_error():
    err = InternalError("boom")
    assert isinstance(err, ControllerError)
    assert str(err) == "boom"
    assert err.describe() == "INTERNAL: boom"


def test_failed_precondition_is_controller_error():
    err = FailedPreconditionError("not ready")
    assert isinstance(err, ControllerError)
    assert not isinstance(err, InternalError)
    assert str(err) == "not ready"
    assert err.describe() == "FAILED_PRECONDITION: not ready"


def test_describe_prefixes_code():
    assert InternalError("boom").describe() == "INTERNAL: boom"
    assert (
        FailedPreconditionError("not ready").describe()
        == "FAILED_PRECONDITION: not ready"
    )


def test_describe_differs_between_kinds():
    internal = InternalError("x").describe()
    precondition = FailedPreconditionError("x").describe()
    assert internal == "INTERNAL: x"
    assert precondition == "FAILED_PRECONDITION: x"
    assert internal.endswith(": x")
    assert precondition.endswith(": x")