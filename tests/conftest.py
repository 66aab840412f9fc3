import pytest
from unittest.mock import MagicMock
from assessment_reports.app import create_app
from assessment_reports.config.settings import ASSESSMENTS_COLLECTION, SUBMISSIONS_COLLECTION


class FakeCursor(list):
    """List that also works as the context-managed cursor aggregate() returns"""

    def __enter__(self):
        return iter(self)

    def __exit__(self, *exc):
        return False


def stub_find(collection, docs, total=None):
    """Make collection.find(...).sort(...).skip(...).limit(...) return docs"""
    collection.find.return_value.sort.return_value.skip.return_value.limit.return_value = list(docs)
    collection.count_documents.return_value = len(docs) if total is None else total


def _matches(doc, match_filter):
    return all(doc.get(key) == value for key, value in match_filter.items() if not isinstance(value, dict))


def stub_store(collection, docs):
    """Equality-matching find/find_one/count_documents over docs, like a shared collection"""
    def find(match_filter, projection=None):
        cursor = MagicMock()
        cursor.sort.return_value.skip.return_value.limit.return_value = [
            d for d in docs if _matches(d, match_filter)
        ]
        return cursor

    collection.find.side_effect = find
    collection.find_one.side_effect = lambda match_filter, projection=None: next(
        (d for d in docs if _matches(d, match_filter)), None
    )
    collection.count_documents.side_effect = lambda match_filter: sum(1 for d in docs if _matches(d, match_filter))


@pytest.fixture
def mock_db():
    """Dict-backed database handle with one mock per collection"""
    return {
        ASSESSMENTS_COLLECTION: MagicMock(name="assessments"),
        SUBMISSIONS_COLLECTION: MagicMock(name="submissions"),
    }


@pytest.fixture
def assessments(mock_db):
    return mock_db[ASSESSMENTS_COLLECTION]


@pytest.fixture
def submissions(mock_db):
    return mock_db[SUBMISSIONS_COLLECTION]


@pytest.fixture
def app(mock_db, tmp_path, monkeypatch):
    monkeypatch.setattr("assessment_reports.config.settings.LogConfig.DIR", str(tmp_path))
    application = create_app(db=mock_db)
    application.config.update(TESTING=True)
    yield application
    application.repo_factory.shutdown()


@pytest.fixture
def client(app):
    return app.test_client()
