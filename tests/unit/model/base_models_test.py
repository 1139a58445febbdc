"""Unit tests for the bundled model bases and the manager type enum."""
import pytest

from user_extension.enum.manager_type_enum import ManagerTypeEnum
from user_extension.enum.storage_family_enum import StorageFamilyEnum
from user_extension.enum.wiring_directive_enum import WiringDirectiveEnum
from user_extension.model.base_user import BaseUser
from user_extension.model.document.base_user import BaseDocumentUser
from user_extension.model.entity.base_group import BaseEntityGroup
from user_extension.model.entity.base_user import BaseEntityUser


class TestBaseModels:
    def test_family_bases_share_the_storage_agnostic_base(self) -> None:
        # Given / When
        entity_user = BaseEntityUser(username="jdoe", email="jdoe@example.com", id=1)
        document_user = BaseDocumentUser(username="jdoe", email="jdoe@example.com", id="65a1f0")

        # Then
        assert isinstance(entity_user, BaseUser)
        assert isinstance(document_user, BaseUser)
        assert not isinstance(entity_user, BaseDocumentUser)

    def test_id_is_unset_until_persisted(self) -> None:
        assert BaseEntityGroup(name="admins").id is None


class TestManagerTypeEnum:
    @pytest.mark.parametrize(
        "manager_type, family, foreign",
        [
            (ManagerTypeEnum.ORM, StorageFamilyEnum.RELATIONAL, StorageFamilyEnum.DOCUMENT),
            (ManagerTypeEnum.MONGODB, StorageFamilyEnum.DOCUMENT, StorageFamilyEnum.RELATIONAL),
        ],
    )
    def test_families(
        self, manager_type: ManagerTypeEnum, family: StorageFamilyEnum, foreign: StorageFamilyEnum
    ) -> None:
        assert manager_type.storage_family is family
        assert manager_type.foreign_storage_family is foreign

    def test_wiring_directives_per_manager_type(self) -> None:
        assert WiringDirectiveEnum.for_manager_type("orm") is WiringDirectiveEnum.ORM
        assert WiringDirectiveEnum.admin_for_manager_type("mongodb") is WiringDirectiveEnum.ADMIN_MONGODB
