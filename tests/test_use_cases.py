import asyncio
from decimal import Decimal

import pytest

from fusion_order.application.dtos.order_dtos import OrderFormCreateDTO
from fusion_order.application.dtos.product_dtos import ProductCreateDto, ProductUpdateDto
from fusion_order.application.dtos.user_dtos import CreateUserDto, LoginUserDto, UpdateUserDto
from fusion_order.application.use_cases.create_order import CreateOrderFormUseCase
from fusion_order.application.use_cases.login_user import LoginUserUseCase
from fusion_order.application.use_cases.manage_users import (
    DeleteUserUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)
from fusion_order.application.use_cases.order_use_cases import GetOrderFormUseCase
from fusion_order.application.use_cases.product_use_cases import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    UpdateProductUseCase,
)
from fusion_order.application.use_cases.register_user import RegisterUserUseCase
from fusion_order.core.security import token_service
from fusion_order.domain.entities.user import User
from fusion_order.domain.enums import OrderStatus, UserRole
from fusion_order.domain.errors import DomainError, ErrorKind


def run(coro):
    return asyncio.run(coro)


def register(unit_of_work, username="alice", password="secret1", **extra):
    return run(RegisterUserUseCase(unit_of_work).execute(
        CreateUserDto(username=username, password=password, **extra)
    ))


def test_register_stores_hash_not_plaintext(unit_of_work):
    user = register(unit_of_work)
    stored = run(unit_of_work.users.get_by_id(user.id))
    assert stored.hashed_password != "secret1"
    assert stored.role == UserRole.USER


def test_register_duplicate_username(unit_of_work):
    register(unit_of_work)
    with pytest.raises(DomainError) as exc_info:
        register(unit_of_work)
    assert exc_info.value.kind == ErrorKind.DUPLICATE_USERNAME


def test_register_duplicate_email(unit_of_work):
    register(unit_of_work, email="a@example.com")
    with pytest.raises(DomainError) as exc_info:
        register(unit_of_work, username="alice2", email="a@example.com")
    assert exc_info.value.kind == ErrorKind.DUPLICATE_EMAIL


async def add_directly(unit_of_work, user):
    async with unit_of_work:
        return await unit_of_work.users.add(user)


@pytest.mark.parametrize(
    "username, email, kind",
    [
        ("alice", "other@example.com", ErrorKind.DUPLICATE_USERNAME),
        ("alice2", "a@example.com", ErrorKind.DUPLICATE_EMAIL),
    ],
)
def test_unique_index_rejects_duplicates_past_service_checks(unit_of_work, username, email, kind):
    register(unit_of_work, email="a@example.com")
    with pytest.raises(DomainError) as exc_info:
        run(add_directly(unit_of_work, User.create(username=username, hashed_password="x", email=email)))
    assert exc_info.value.kind == kind

    # Rolled back; the session stays usable
    assert [u.username for u in run(unit_of_work.users.list_all())] == ["alice"]


def test_register_with_role(unit_of_work):
    assert register(unit_of_work, role=UserRole.MANAGER).role == UserRole.MANAGER


def test_login_issues_token_with_stored_role(unit_of_work):
    register(unit_of_work, role=UserRole.ADMIN)
    auth = run(LoginUserUseCase(unit_of_work, token_service).execute(
        LoginUserDto(username="alice", password="secret1")
    ))
    assert auth.role == UserRole.ADMIN
    assert token_service.get_username(auth.token) == "alice"
    assert token_service.get_role(auth.token) == "ADMIN"
    assert not token_service.is_expired(auth.token)


@pytest.mark.parametrize("username, password", [("alice", "wrong1"), ("ghost", "secret1")])
def test_login_invalid_credentials(unit_of_work, username, password):
    register(unit_of_work)
    with pytest.raises(DomainError) as exc_info:
        run(LoginUserUseCase(unit_of_work, token_service).execute(
            LoginUserDto(username=username, password=password)
        ))
    assert exc_info.value.kind == ErrorKind.INVALID_CREDENTIALS
    assert exc_info.value.message == "Invalid username or password"


def test_login_account_disabled(unit_of_work):
    user = register(unit_of_work)
    run(UpdateUserUseCase(unit_of_work).execute(user.id, UpdateUserDto(enabled=False)))
    with pytest.raises(DomainError) as exc_info:
        run(LoginUserUseCase(unit_of_work, token_service).execute(
            LoginUserDto(username="alice", password="secret1")
        ))
    assert exc_info.value.kind == ErrorKind.ACCOUNT_DISABLED


def test_user_patch_changes_one_field(unit_of_work):
    user = register(unit_of_work, email="a@example.com", phone="111")
    updated = run(UpdateUserUseCase(unit_of_work).execute(user.id, UpdateUserDto(phone="222")))
    assert updated.phone == "222"
    assert (updated.username, updated.email, updated.role, updated.enabled) == (
        user.username, user.email, user.role, user.enabled,
    )


def test_user_delete_then_get_is_not_found(unit_of_work):
    user = register(unit_of_work)
    run(DeleteUserUseCase(unit_of_work).execute(user.id))
    with pytest.raises(DomainError) as exc_info:
        run(GetUserUseCase(unit_of_work).execute(user.id))
    assert exc_info.value.kind == ErrorKind.NOT_FOUND


def create_product(unit_of_work, **fields):
    data = {"name": "Widget", "category": "tools", "price": Decimal("9.99")}
    data.update(fields)
    return run(CreateProductUseCase(unit_of_work).execute(ProductCreateDto(**data)))


def test_product_patch_changes_one_field(unit_of_work):
    product = create_product(unit_of_work, description="original")
    updated = run(UpdateProductUseCase(unit_of_work).execute(product.id, ProductUpdateDto(name="Gadget")))
    assert updated.name == "Gadget"
    assert updated.description == "original"
    assert updated.price == Decimal("9.99")
    assert updated.available is True


def test_product_in_use_cannot_be_deleted(unit_of_work):
    product = create_product(unit_of_work)
    run(CreateOrderFormUseCase(unit_of_work).execute(
        OrderFormCreateDTO(product_id=product.id, quantity=1, contact_name="Bob", contact_phone="555")
    ))
    with pytest.raises(DomainError) as exc_info:
        run(DeleteProductUseCase(unit_of_work).execute(product.id))
    assert exc_info.value.kind == ErrorKind.PRODUCT_IN_USE
    assert run(GetProductUseCase(unit_of_work).execute(product.id)).id == product.id


def test_order_for_missing_product(unit_of_work):
    with pytest.raises(DomainError) as exc_info:
        run(CreateOrderFormUseCase(unit_of_work).execute(
            OrderFormCreateDTO(product_id=42, quantity=1, contact_name="Bob", contact_phone="555")
        ))
    assert exc_info.value.kind == ErrorKind.PRODUCT_NOT_FOUND


def test_order_embeds_stored_product(unit_of_work):
    product = create_product(unit_of_work)
    order = run(CreateOrderFormUseCase(unit_of_work).execute(
        OrderFormCreateDTO.model_validate({
            "product": {"id": product.id, "name": "Counterfeit"},
            "quantity": 2,
            "contactName": "Bob",
            "contactPhone": "555",
        })
    ))
    stored = run(GetOrderFormUseCase(unit_of_work).execute(order.id))
    assert stored.product_id == product.id
    assert stored.product_name == "Widget"
    assert stored.status == OrderStatus.PENDING
