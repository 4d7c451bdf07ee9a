import os
from decimal import Decimal

import boto3

from services.catalog.domain.repository import CatalogRepository
from services.catalog.domain.value_object import AddOnPrice, TourRate, VehicleRate
from services.shared.domain import Currency, Money

RATE_SK = "RATE"


class DynamoDBCatalogRepository(CatalogRepository):
    """DynamoDBを使用したCatalogRepository の具象実装

    アイテム構造: PK=VEHICLE#<id> / TOUR#<id> / ADDON#<id>, SK=RATE
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = (
            table_name or os.getenv("CATALOG_TABLE_NAME") or os.getenv("TABLE_NAME")
        )
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def get_vehicle_rate(self, vehicle_id: str) -> VehicleRate | None:
        """車両の料金表を取得する"""
        item = self._get_item(f"VEHICLE#{vehicle_id}")
        if item is None:
            return None
        currency = Currency(item.get("currency", "EUR"))
        return VehicleRate(
            vehicle_id=str(item["vehicle_id"]),
            per_km=Money(amount=Decimal(str(item["per_km_price"])), currency=currency),
            hourly=Money(amount=Decimal(str(item["hourly_price"])), currency=currency),
        )

    def get_tour_rate(self, tour_id: str) -> TourRate | None:
        """ツアーの料金を取得する"""
        item = self._get_item(f"TOUR#{tour_id}")
        if item is None:
            return None
        return TourRate(
            tour_id=str(item["tour_id"]),
            per_person=Money(
                amount=Decimal(str(item["price_per_person"])),
                currency=Currency(item.get("currency", "EUR")),
            ),
        )

    def get_add_on(self, add_on_id: str) -> AddOnPrice | None:
        """追加サービスの単価を取得する"""
        item = self._get_item(f"ADDON#{add_on_id}")
        if item is None:
            return None
        return AddOnPrice(
            add_on_id=str(item["add_on_id"]),
            name=item.get("name", ""),
            unit_price=Money(
                amount=Decimal(str(item["price"])),
                currency=Currency(item.get("currency", "EUR")),
            ),
            is_active=bool(item.get("is_active", True)),
        )

    def _get_item(self, pk: str) -> dict | None:
        response = self.table.get_item(Key={"PK": pk, "SK": RATE_SK})
        return response.get("Item")
