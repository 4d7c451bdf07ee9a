import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import PaymentStatus, ReservationType
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.value_object import (
    AdditionalPassenger,
    CustomerContact,
    EmailAddress,
    ReservationAddOn,
    ReservationId,
)
from services.shared.domain import Currency, IsoDateTime, Money
from services.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
)

RESERVATION_SK = "RESERVATION"
RESERVATIONS_GSI1PK = "RESERVATIONS"
GSI1_INDEX_NAME = "GSI1"


class DynamoDBReservationRepository(ReservationRepository):
    """DynamoDBを使用したReservationRepository の具象実装

    同乗者・追加サービスは予約アイテム内のリストとして 1 アイテムに保存する。
    1 回の put_item で集約全体が書き込まれるため、明細だけが欠けた予約は残らない。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, reservation: Reservation) -> None:
        """予約をDBに保存する"""
        item = self._to_item(reservation)
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Reservation already exists: {reservation.id}"
                ) from e
            raise

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key=self._key(reservation_id),
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def update_payment_status(
        self,
        reservation: Reservation,
        expected_status: PaymentStatus | None = None,
    ) -> None:
        """決済ステータスを更新する"""
        kwargs: dict = {
            "Key": self._key(reservation.id),
            "UpdateExpression": "SET #payment_status = :payment_status",
            "ExpressionAttributeNames": {"#payment_status": "payment_status"},
            "ExpressionAttributeValues": {
                ":payment_status": reservation.payment_status.value
            },
        }

        if expected_status is not None:
            kwargs["ConditionExpression"] = Attr("payment_status").eq(
                expected_status.value
            )

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Reservation payment status conflict: "
                    f"expected {expected_status}, "
                    f"reservation_id={reservation.id}"
                ) from e
            raise

    def find_all(self, limit: int = 50) -> list[Reservation]:
        """GSI1 を作成日時の降順で検索する"""
        response = self.table.query(
            IndexName=GSI1_INDEX_NAME,
            KeyConditionExpression=Key("GSI1PK").eq(RESERVATIONS_GSI1PK),
            ScanIndexForward=False,
            Limit=limit,
        )
        return [self._to_entity(item) for item in response.get("Items", [])]

    @staticmethod
    def _key(reservation_id: ReservationId) -> dict:
        return {"PK": f"RESERVATION#{reservation_id}", "SK": RESERVATION_SK}

    def _to_item(self, reservation: Reservation) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        created_at = str(reservation.created_at)
        item = {
            **self._key(reservation.id),
            "entity_type": "RESERVATION",
            "reservation_id": str(reservation.id),
            "full_name": reservation.contact.full_name,
            "email": str(reservation.contact.email),
            "passengers": reservation.passengers,
            "total_amount": str(reservation.total_price.amount),
            "currency": str(reservation.total_price.currency),
            "payment_status": reservation.payment_status.value,
            "created_at": created_at,
            "additional_passengers": [
                {"first_name": p.first_name, "last_name": p.last_name}
                for p in reservation.additional_passengers
            ],
            "add_ons": [
                {
                    "add_on_id": a.add_on_id,
                    "name": a.name,
                    "quantity": a.quantity,
                    "unit_price": str(a.unit_price.amount),
                    "line_total": str(a.line_total.amount),
                }
                for a in reservation.add_ons
            ],
            "GSI1PK": RESERVATIONS_GSI1PK,
            "GSI1SK": f"{created_at}#{reservation.id}",
        }
        optional = {
            "phone": reservation.contact.phone,
            "vehicle_id": reservation.vehicle_id,
            "tour_id": reservation.tour_id,
            "pickup_location": reservation.pickup_location,
            "dropoff_location": reservation.dropoff_location,
            "pickup_datetime": (
                str(reservation.pickup_datetime)
                if reservation.pickup_datetime
                else None
            ),
            "reservation_type": (
                reservation.reservation_type.value
                if reservation.reservation_type
                else None
            ),
        }
        item.update({k: v for k, v in optional.items() if v is not None})
        return item

    def _to_entity(self, item: dict) -> Reservation:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency(item["currency"])
        pickup_datetime = item.get("pickup_datetime")
        reservation_type = item.get("reservation_type")
        return Reservation(
            id=ReservationId(value=item["reservation_id"]),
            contact=CustomerContact(
                full_name=item["full_name"],
                email=EmailAddress(value=item["email"]),
                phone=item.get("phone"),
            ),
            total_price=Money(
                amount=Decimal(str(item["total_amount"])), currency=currency
            ),
            passengers=int(item["passengers"]),
            created_at=IsoDateTime.from_string(item["created_at"]),
            vehicle_id=item.get("vehicle_id"),
            tour_id=item.get("tour_id"),
            reservation_type=(
                ReservationType(reservation_type) if reservation_type else None
            ),
            pickup_location=item.get("pickup_location"),
            dropoff_location=item.get("dropoff_location"),
            pickup_datetime=(
                IsoDateTime.from_string(pickup_datetime) if pickup_datetime else None
            ),
            additional_passengers=tuple(
                AdditionalPassenger(
                    first_name=p["first_name"], last_name=p["last_name"]
                )
                for p in item.get("additional_passengers", [])
            ),
            add_ons=tuple(
                ReservationAddOn(
                    add_on_id=a["add_on_id"],
                    name=a.get("name", ""),
                    quantity=int(a["quantity"]),
                    unit_price=Money(
                        amount=Decimal(str(a["unit_price"])), currency=currency
                    ),
                    line_total=Money(
                        amount=Decimal(str(a["line_total"])), currency=currency
                    ),
                )
                for a in item.get("add_ons", [])
            ),
            payment_status=PaymentStatus(item["payment_status"]),
        )
