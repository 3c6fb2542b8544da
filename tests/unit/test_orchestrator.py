import asyncio
from datetime import date
import pytest
from catalog_studio.core.orchestrator import RequestOrchestrator, RequestState, RequestStatus
from catalog_studio.utils.errors import GenerationError, ValidationError
from catalog_studio.utils.typing import Item, LicenseType

TODAY = date(2026, 3, 15)
ITEM = Item(name="PhpStorm", code="PS")

class FakeGenerator:
    def __init__(self, result="CODE-123", error=None):
        self.calls = []
        self.result = result
        self.error = error
        self.gate = asyncio.Event()
        self.gate.set()

    async def __call__(self, code, licensee, assignee, expiry):
        self.calls.append((code, licensee, assignee, expiry))
        await self.gate.wait()
        if self.error:
            raise self.error
        return self.result

def make(gen=None):
    gen = gen or FakeGenerator()
    return RequestOrchestrator(gen, today=lambda: TODAY), gen

def test_defaults():
    orch, _ = make()
    assert orch.state == RequestState.idle()
    assert orch.selection is None
    assert orch.parameters.expiry_date == "2027-03-15"
    assert orch.parameters.license_type is LicenseType.PERPETUAL
    assert orch.parameters.user_count == 1

def test_default_expiry_on_leap_day():
    orch = RequestOrchestrator(FakeGenerator(), today=lambda: date(2028, 2, 29))
    assert orch.parameters.expiry_date == "2029-02-28"

def test_parameter_edits():
    orch, _ = make()
    orch.select(ITEM)
    assert orch.set_expiry_offset(30) == "2026-04-14"
    orch.set_expiry_date("2030-01-01")
    assert orch.parameters.expiry_date == "2030-01-01"
    orch.set_license_type("SUBSCRIPTION")
    assert orch.parameters.license_type is LicenseType.SUBSCRIPTION
    orch.set_user_count(5)
    assert orch.parameters.user_count == 5

@pytest.mark.parametrize("bad", ["2030-13-01", "2030/01/01", "tomorrow", ""])
def test_invalid_expiry_rejected(bad):
    orch, _ = make()
    with pytest.raises(ValidationError):
        orch.set_expiry_date(bad)

def test_invalid_user_count_and_type_rejected():
    orch, _ = make()
    with pytest.raises(ValidationError):
        orch.set_user_count(0)
    with pytest.raises(ValidationError):
        orch.set_license_type("LIFETIME")

@pytest.mark.asyncio
@pytest.mark.parametrize("selection,licensee,assignee", [
    (None, "Acme", "Jo"),
    (ITEM, "", "Jo"),
    (ITEM, "Acme", "   "),
])
async def test_submit_guard_refuses_without_state_change(selection, licensee, assignee):
    orch, gen = make()
    if selection:
        orch.select(selection)
    assert await orch.submit(licensee, assignee) is False
    assert orch.state == RequestState.idle()
    assert gen.calls == []

@pytest.mark.asyncio
async def test_success_clears_selection_and_keeps_payload():
    orch, gen = make()
    orch.select(ITEM)
    orch.set_expiry_offset(90)
    assert await orch.submit(" Acme ", "Jo") is True
    assert gen.calls == [("PS", "Acme", "Jo", "2026-06-13")]
    assert orch.state.status is RequestStatus.SUCCESS
    assert orch.state.payload == "CODE-123"
    assert orch.selection is None
    assert orch.parameters.expiry_date == "2027-03-15"

    orch.acknowledge()
    assert orch.state == RequestState.idle()

@pytest.mark.asyncio
async def test_item_without_code_is_submitted_without_code():
    orch, gen = make()
    orch.select(Item(name="Everything"))
    await orch.submit("Acme", "Jo")
    assert gen.calls[0][0] is None

@pytest.mark.asyncio
async def test_failure_keeps_selection_and_parameters_for_retry():
    orch, gen = make(FakeGenerator(error=GenerationError("HTTP error! status: 502")))
    orch.select(ITEM)
    orch.set_expiry_date("2031-05-05")
    await orch.submit("Acme", "Jo")

    assert orch.state.status is RequestStatus.FAILED
    assert "502" in orch.state.reason
    assert orch.selection == ITEM
    assert orch.parameters.expiry_date == "2031-05-05"

    gen.error = None
    assert await orch.submit("Acme", "Jo") is True
    assert orch.state.status is RequestStatus.SUCCESS
    assert len(gen.calls) == 2

@pytest.mark.asyncio
async def test_at_most_one_request_in_flight():
    gen = FakeGenerator()
    gen.gate.clear()
    orch, _ = make(gen)
    orch.select(ITEM)

    first = asyncio.ensure_future(orch.submit("Acme", "Jo"))
    await asyncio.sleep(0)
    assert orch.state.is_in_flight
    assert orch.can_submit("Acme", "Jo") is False

    assert await orch.submit("Acme", "Jo") is False
    assert orch.state.is_in_flight
    assert len(gen.calls) == 1

    gen.gate.set()
    assert await first is True
    assert orch.state.status is RequestStatus.SUCCESS

@pytest.mark.asyncio
async def test_reset_during_flight_drops_late_result():
    gen = FakeGenerator()
    gen.gate.clear()
    orch, _ = make(gen)
    orch.select(ITEM)

    pending = asyncio.ensure_future(orch.submit("Acme", "Jo"))
    await asyncio.sleep(0)
    orch.reset()
    assert orch.state == RequestState.idle()
    assert orch.selection is None

    gen.gate.set()
    await pending
    assert orch.state == RequestState.idle()

@pytest.mark.asyncio
async def test_unexpected_error_fails_request_and_propagates():
    orch, _ = make(FakeGenerator(error=RuntimeError("bug")))
    orch.select(ITEM)
    with pytest.raises(RuntimeError):
        await orch.submit("Acme", "Jo")
    assert orch.state.status is RequestStatus.FAILED

def test_reset_restores_defaults():
    orch, _ = make()
    orch.select(ITEM)
    orch.set_user_count(3)
    orch.reset()
    assert orch.selection is None
    assert orch.parameters.user_count == 1

@pytest.mark.asyncio
async def test_selection_is_locked_while_in_flight():
    gen = FakeGenerator()
    gen.gate.clear()
    orch, _ = make(gen)
    other = Item(name="GoLand", code="GO")
    orch.select(ITEM)
    orch.set_expiry_offset(30)

    pending = asyncio.ensure_future(orch.submit("Acme", "Jo"))
    await asyncio.sleep(0)
    assert orch.select(other) is False
    assert orch.selection == ITEM
    assert orch.parameters.expiry_date == "2026-04-14"

    gen.gate.set()
    assert await pending is True
    assert orch.state.status is RequestStatus.SUCCESS
    assert gen.calls == [("PS", "Acme", "Jo", "2026-04-14")]

    # once the result is shown a new item can be picked again
    assert orch.select(other) is True
    assert orch.selection == other
    assert orch.state == RequestState.idle()
