from src.adapter.services.session_identity_provider import SessionIdentityProvider


def test_starts_signed_out():
    assert SessionIdentityProvider().get_current_identity() is None


def test_listeners_see_sign_in_and_sign_out(tenant):
    provider = SessionIdentityProvider()
    seen = []
    provider.on_identity_change(seen.append)

    provider.sign_in(tenant)
    provider.sign_out()

    assert seen == [tenant, None]
    assert provider.get_current_identity() is None


def test_unsubscribe_stops_callbacks(tenant, manager):
    provider = SessionIdentityProvider()
    seen = []
    unsubscribe = provider.on_identity_change(seen.append)

    provider.sign_in(tenant)
    unsubscribe()
    provider.sign_in(manager)

    assert seen == [tenant]
    assert provider.get_current_identity() == manager


def test_sign_out_when_signed_out_is_silent():
    provider = SessionIdentityProvider()
    seen = []
    provider.on_identity_change(seen.append)

    provider.sign_out()

    assert seen == []
