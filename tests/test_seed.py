from app.db.seed import SAMPLE_VENUES, seed
from app.services.venues import list_venues


def test_seed_inserts_sample_venues_once(db_session):
    assert seed(db_session) == len(SAMPLE_VENUES)
    assert seed(db_session) == 0
    assert len(list_venues(db_session)) == len(SAMPLE_VENUES)


def test_seed_reset_replaces_active_venues(db_session):
    seed(db_session)
    assert seed(db_session, reset=True) == len(SAMPLE_VENUES)

    names = sorted(v.name for v in list_venues(db_session))
    assert names == sorted(v.name for v in SAMPLE_VENUES)
