"""Integration tests for the client use cases."""

from datetime import timedelta
from uuid import uuid4

import pytest

from ims.application.create_client import (
    CreateBusinessClientHandler,
    CreateIndividualClientHandler,
)
from ims.application.delete_client import DeleteClientHandler
from ims.application.dto import (
    BusinessClientDTO,
    BusinessClientSpec,
    IndividualClientDTO,
    IndividualClientSpec,
)
from ims.application.list_clients import ListClientsHandler
from ims.application.search_clients import SearchClientsHandler
from ims.application.show_client import ShowClientHandler
from ims.application.update_client import (
    UpdateBusinessClientHandler,
    UpdateIndividualClientHandler,
)
from ims.domain.exceptions import (
    ClientNotFoundError,
    DuplicateNiptError,
    InvalidClientDataError,
    UnauthorizedError,
    ValidationError,
)
from tests.fakes import FakeClientRepository

ACTOR = uuid4()


def _person(**overrides) -> IndividualClientSpec:
    fields = dict(first_name="Ana", last_name="Hoxha", email="ana@example.com")
    fields.update(overrides)
    return IndividualClientSpec(**fields)


def _company(**overrides) -> BusinessClientSpec:
    fields = dict(
        nipt="K12345678A",
        contact_person_first_name="Besa",
        contact_person_last_name="Kola",
        owner_first_name="Dritan",
        owner_last_name="Leka",
    )
    fields.update(overrides)
    return BusinessClientSpec(**fields)


@pytest.fixture
def repo() -> FakeClientRepository:
    return FakeClientRepository()


def _add_person(repo, **overrides):
    return CreateIndividualClientHandler(repo).handle(_person(**overrides), ACTOR)


def _add_company(repo, **overrides):
    return CreateBusinessClientHandler(repo).handle(_company(**overrides), ACTOR)


def _age(repo, client_id, days):
    client = repo.get_by_id(client_id)
    client.created_at -= timedelta(days=days)


class TestCreateClient:

    def test_individual(self, repo):
        dto = _add_person(repo)
        assert isinstance(dto, IndividualClientDTO)
        assert dto.full_name == "Ana Hoxha"
        assert dto.client_type == "Individual"
        assert dto.created_by == str(ACTOR)
        assert dto.display_name == "Ana Hoxha"

    def test_business(self, repo):
        dto = _add_company(repo, nipt="k12345678a")
        assert isinstance(dto, BusinessClientDTO)
        assert dto.nipt == "K12345678A"
        assert dto.owner_full_name == "Dritan Leka"
        assert dto.contact_person_full_name == "Besa Kola"

    def test_requires_actor(self, repo):
        with pytest.raises(UnauthorizedError):
            CreateIndividualClientHandler(repo).handle(_person(), None)

    def test_invalid_data(self, repo):
        with pytest.raises(InvalidClientDataError):
            _add_person(repo, email="nope")
        assert repo.list_all(include_inactive=True) == []

    def test_invalid_nipt(self, repo):
        with pytest.raises(ValidationError, match="NIPT"):
            _add_company(repo, nipt="123")

    def test_duplicate_nipt(self, repo):
        _add_company(repo)
        with pytest.raises(DuplicateNiptError):
            _add_company(repo, nipt="k12345678A")

    def test_nipt_of_deleted_client_can_be_reused(self, repo):
        first = _add_company(repo)
        DeleteClientHandler(repo).handle(first.id, ACTOR)
        second = _add_company(repo)
        assert second.id != first.id


class TestUpdateClient:

    def test_update_individual(self, repo):
        dto = _add_person(repo)
        updated = UpdateIndividualClientHandler(repo).handle(
            dto.id, _person(last_name="Dervishi", phone_number="069 123 4567"), ACTOR
        )
        assert updated.full_name == "Ana Dervishi"
        assert updated.phone_number == "069 123 4567"
        assert updated.updated_by == str(ACTOR)

    def test_update_individual_with_business_id(self, repo):
        company = _add_company(repo)
        with pytest.raises(ClientNotFoundError):
            UpdateIndividualClientHandler(repo).handle(company.id, _person(), ACTOR)

    def test_update_business_changes_nipt(self, repo):
        dto = _add_company(repo)
        updated = UpdateBusinessClientHandler(repo).handle(
            dto.id, _company(nipt="L98765432B"), ACTOR
        )
        assert updated.nipt == "L98765432B"

    def test_update_business_keeps_own_nipt(self, repo):
        dto = _add_company(repo)
        updated = UpdateBusinessClientHandler(repo).handle(
            dto.id, _company(contact_person_first_name="Arta"), ACTOR
        )
        assert updated.contact_person_first_name == "Arta"

    def test_update_business_to_taken_nipt(self, repo):
        _add_company(repo, nipt="L98765432B")
        dto = _add_company(repo)
        with pytest.raises(DuplicateNiptError):
            UpdateBusinessClientHandler(repo).handle(dto.id, _company(nipt="L98765432B"), ACTOR)

    def test_update_unknown(self, repo):
        with pytest.raises(ClientNotFoundError):
            UpdateBusinessClientHandler(repo).handle("missing", _company(), ACTOR)

    def test_update_requires_actor(self, repo):
        dto = _add_person(repo)
        with pytest.raises(UnauthorizedError):
            UpdateIndividualClientHandler(repo).handle(dto.id, _person(), None)


class TestDeleteClient:

    def test_soft_delete(self, repo):
        dto = _add_person(repo)
        DeleteClientHandler(repo).handle(dto.id, ACTOR)
        client = repo.get_by_id(dto.id)
        assert not client.is_active
        assert client.updated_by == str(ACTOR)
        assert ListClientsHandler(repo).handle() == []

    def test_unknown(self, repo):
        with pytest.raises(ClientNotFoundError):
            DeleteClientHandler(repo).handle("missing", ACTOR)

    def test_requires_actor(self, repo):
        dto = _add_person(repo)
        with pytest.raises(UnauthorizedError):
            DeleteClientHandler(repo).handle(dto.id, None)


class TestQueries:

    def test_show(self, repo):
        dto = _add_company(repo)
        assert ShowClientHandler(repo).handle(dto.id).nipt == "K12345678A"

    def test_show_unknown(self, repo):
        with pytest.raises(ClientNotFoundError):
            ShowClientHandler(repo).handle("missing")

    def test_list_individuals_before_businesses_newest_first(self, repo):
        old_person = _add_person(repo, first_name="Old")
        _age(repo, old_person.id, 2)
        company = _add_company(repo)
        new_person = _add_person(repo, first_name="New")
        ids = [c.id for c in ListClientsHandler(repo).handle()]
        assert ids == [new_person.id, old_person.id, company.id]

    def test_list_by_type(self, repo):
        _add_person(repo)
        company = _add_company(repo)
        result = ListClientsHandler(repo).handle(client_type_id=2)
        assert [c.id for c in result] == [company.id]

    def test_list_unknown_type(self, repo):
        with pytest.raises(ValidationError, match="Invalid client type"):
            ListClientsHandler(repo).handle(client_type_id=7)

    def test_search_is_case_insensitive(self, repo):
        _add_person(repo, first_name="Ana")
        _add_person(repo, first_name="Mira", email="mira@example.com")
        result = SearchClientsHandler(repo).handle(term="ANA")
        assert [c.first_name for c in result] == ["Ana"]

    def test_search_matches_business_fields(self, repo):
        _add_company(repo)
        assert len(SearchClientsHandler(repo).handle(term="leka")) == 1
        assert len(SearchClientsHandler(repo).handle(term="5678a")) == 1
        assert SearchClientsHandler(repo).handle(term="zzz") == []

    def test_search_blank_term_returns_all(self, repo):
        _add_person(repo)
        _add_company(repo)
        assert len(SearchClientsHandler(repo).handle(term="  ")) == 2

    def test_search_skips_inactive_unless_asked(self, repo):
        dto = _add_person(repo)
        DeleteClientHandler(repo).handle(dto.id, ACTOR)
        assert SearchClientsHandler(repo).handle(term="ana") == []
        assert len(SearchClientsHandler(repo).handle(term="ana", include_inactive=True)) == 1
