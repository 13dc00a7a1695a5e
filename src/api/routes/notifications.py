from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from src.api.error import raise_for_error
from src.api.response import success
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.notifications import (
    DeleteAllNotificationsUseCase,
    DeleteNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllReadUseCase,
    MarkNotificationReadUseCase,
)
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("")
async def list_notifications(
    read: Optional[bool] = Query(None),
    limit: int = Query(50),
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListNotificationsUseCase(uow).execute(user_id, read, limit)
    if result.is_err():
        raise_for_error(result.error)
    return success(
        data=result.value.notifications,
        count=len(result.value.notifications),
        unreadCount=result.value.unread_count,
    )


@router.get("/unread/count")
async def unread_count(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetUnreadCountUseCase(uow).execute(user_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.put("/read-all")
async def mark_all_read(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await MarkAllReadUseCase(uow).execute(user_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value, message="All notifications marked as read")


@router.put("/{notification_id}/read")
async def mark_read(
    notification_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await MarkNotificationReadUseCase(uow).execute(user_id, notification_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value)


@router.delete("")
async def delete_all_notifications(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteAllNotificationsUseCase(uow).execute(user_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(data=result.value, message="All notifications deleted")


@router.delete("/{notification_id}")
async def delete_notification(
    notification_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteNotificationUseCase(uow).execute(user_id, notification_id)
    if result.is_err():
        raise_for_error(result.error)
    return success(message="Notification deleted")
