"""Translation between `users` rows and User entities."""

from user_registry.domain.common.value_objects.ids import UserId
from user_registry.domain.identity.entities.user import User
from user_registry.models import User as UserORM


class UserMapper:
    """Copies user fields between the ORM model and the domain entity."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Rebuild a saved user from its row."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            name=orm_model.name,
            age=orm_model.age,
            date_of_birth=orm_model.date_of_birth,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """
        Copy the entity onto `orm_model`, or onto a new row when none is given.

        A new row for an unsaved user gets no primary key, letting the
        database generate one.
        """
        if orm_model is not None:
            orm_model.name = domain_entity.name
            orm_model.age = domain_entity.age
            orm_model.date_of_birth = domain_entity.date_of_birth
            return orm_model

        return UserORM(
            id=domain_entity.persisted_id,
            name=domain_entity.name,
            age=domain_entity.age,
            date_of_birth=domain_entity.date_of_birth,
        )
