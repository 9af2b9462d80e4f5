"""Demographic filters that narrow the audience of a narrowcast."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class GenderType(str, Enum):
    """Genders a gender filter may match."""

    MALE = "male"
    FEMALE = "female"


class AgeType(str, Enum):
    """Age boundaries of an age filter."""

    EMPTY = ""
    AGE_15 = "age_15"
    AGE_20 = "age_20"
    AGE_25 = "age_25"
    AGE_30 = "age_30"
    AGE_35 = "age_35"
    AGE_40 = "age_40"
    AGE_45 = "age_45"
    AGE_50 = "age_50"


class AppType(str, Enum):
    """Operating systems an app type filter may match."""

    IOS = "ios"
    ANDROID = "android"


class AreaType(str, Enum):
    """Regions an area filter may match."""

    JP_HOKKAIDO = "jp_01"
    JP_AOMORI = "jp_02"
    JP_IWATE = "jp_03"
    JP_MIYAGI = "jp_04"
    JP_AKITA = "jp_05"
    JP_YAMAGATA = "jp_06"
    JP_FUKUSHIMA = "jp_07"
    JP_IBARAKI = "jp_08"
    JP_TOCHIGI = "jp_09"
    JP_GUNMA = "jp_10"
    JP_SAITAMA = "jp_11"
    JP_CHIBA = "jp_12"
    JP_TOKYO = "jp_13"
    JP_KANAGAWA = "jp_14"
    JP_NIIGATA = "jp_15"
    JP_TOYAMA = "jp_16"
    JP_ISHIKAWA = "jp_17"
    JP_FUKUI = "jp_18"
    JP_YAMANASHI = "jp_19"
    JP_NAGANO = "jp_20"
    JP_GIFU = "jp_21"
    JP_SHIZUOKA = "jp_22"
    JP_AICHI = "jp_23"
    JP_MIE = "jp_24"
    JP_SHIGA = "jp_25"
    JP_KYOTO = "jp_26"
    JP_OSAKA = "jp_27"
    JP_HYOUGO = "jp_28"
    JP_NARA = "jp_29"
    JP_WAKAYAMA = "jp_30"
    JP_TOTTORI = "jp_31"
    JP_SHIMANE = "jp_32"
    JP_OKAYAMA = "jp_33"
    JP_HIROSHIMA = "jp_34"
    JP_YAMAGUCHI = "jp_35"
    JP_TOKUSHIMA = "jp_36"
    JP_KAGAWA = "jp_37"
    JP_EHIME = "jp_38"
    JP_KOUCHI = "jp_39"
    JP_FUKUOKA = "jp_40"
    JP_SAGA = "jp_41"
    JP_NAGASAKI = "jp_42"
    JP_KUMAMOTO = "jp_43"
    JP_OITA = "jp_44"
    JP_MIYAZAKI = "jp_45"
    JP_KAGOSHIMA = "jp_46"
    JP_OKINAWA = "jp_47"
    TW_TAIPEI_CITY = "tw_01"
    TW_NEW_TAIPEI_CITY = "tw_02"
    TW_TAOYUAN_CITY = "tw_03"
    TW_TAICHUNG_CITY = "tw_04"
    TW_TAINAN_CITY = "tw_05"
    TW_KAOHSIUNG_CITY = "tw_06"
    TW_KEELUNG_CITY = "tw_07"
    TW_HSINCHU_CITY = "tw_08"
    TW_CHIAYI_CITY = "tw_09"
    TW_HSINCHU_COUNTY = "tw_10"
    TW_MIAOLI_COUNTY = "tw_11"
    TW_CHANGHUA_COUNTY = "tw_12"
    TW_NANTOU_COUNTY = "tw_13"
    TW_YUNLIN_COUNTY = "tw_14"
    TW_CHIAYI_COUNTY = "tw_15"
    TW_PINGTUNG_COUNTY = "tw_16"
    TW_YILAN_COUNTY = "tw_17"
    TW_HUALIEN_COUNTY = "tw_18"
    TW_TAITUNG_COUNTY = "tw_19"
    TW_PENGHU_COUNTY = "tw_20"
    TW_KINMEN_COUNTY = "tw_21"
    TW_LIENCHIANG_COUNTY = "tw_22"
    TH_BANGKOK = "th_01"
    TH_PATTAYA = "th_02"
    TH_NORTHERN = "th_03"
    TH_CENTRAL = "th_04"
    TH_SOUTHERN = "th_05"
    TH_EASTERN = "th_06"
    TH_NORTH_EASTERN = "th_07"
    TH_WESTERN = "th_08"
    ID_BALI = "id_01"
    ID_BANDUNG = "id_02"
    ID_BANJARMASIN = "id_03"
    ID_JABODETABEK = "id_04"
    ID_LAINNYA = "id_05"
    ID_MAKASSAR = "id_06"
    ID_MEDAN = "id_07"
    ID_PALEMBANG = "id_08"
    ID_SAMARINDA = "id_09"
    ID_SEMARANG = "id_10"
    ID_SURABAYA = "id_11"
    ID_YOGYAKARTA = "id_12"


class PeriodType(str, Enum):
    """Friendship period boundaries of a subscription period filter."""

    EMPTY = ""
    DAY_7 = "day_7"
    DAY_30 = "day_30"
    DAY_90 = "day_90"
    DAY_180 = "day_180"
    DAY_365 = "day_365"


def _wire(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class DemographicFilter(ABC):
    """A condition on the demographics of the recipients."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping for this filter."""

    def to_json(self) -> str:
        """Return the compact JSON text for this filter."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))


@dataclass
class GenderFilter(DemographicFilter):
    """Matches recipients of one of the given genders."""

    genders: list[GenderType] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "gender", "oneOf": [_wire(g) for g in self.genders]}


@dataclass
class AgeFilter(DemographicFilter):
    """Matches recipients whose age is at least ``gte`` and below ``lt``."""

    gte: AgeType = AgeType.EMPTY
    lt: AgeType = AgeType.EMPTY

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": "age"}
        if _wire(self.gte):
            result["gte"] = _wire(self.gte)
        if _wire(self.lt):
            result["lt"] = _wire(self.lt)
        return result


@dataclass
class AppTypeFilter(DemographicFilter):
    """Matches recipients using one of the given operating systems."""

    app_types: list[AppType] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "appType", "oneOf": [_wire(a) for a in self.app_types]}


@dataclass
class AreaFilter(DemographicFilter):
    """Matches recipients living in one of the given areas."""

    areas: list[AreaType] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "area", "oneOf": [_wire(a) for a in self.areas]}


@dataclass
class SubscriptionPeriodFilter(DemographicFilter):
    """Matches recipients by how long they have been friends."""

    gte: PeriodType = PeriodType.EMPTY
    lt: PeriodType = PeriodType.EMPTY

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": "subscriptionPeriod"}
        if _wire(self.gte):
            result["gte"] = _wire(self.gte)
        if _wire(self.lt):
            result["lt"] = _wire(self.lt)
        return result


@dataclass
class DemographicFilterOperator(DemographicFilter):
    """Combines filters with and, or or not."""

    condition_and: list[DemographicFilter] = field(default_factory=list)
    condition_or: list[DemographicFilter] = field(default_factory=list)
    condition_not: DemographicFilter | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": "operator"}
        if self.condition_and:
            result["and"] = [c.to_dict() for c in self.condition_and]
        if self.condition_or:
            result["or"] = [c.to_dict() for c in self.condition_or]
        if self.condition_not is not None:
            result["not"] = self.condition_not.to_dict()
        return result


def operator_and(*args: DemographicFilter) -> DemographicFilterOperator:
    """Match recipients satisfying every given condition."""
    return DemographicFilterOperator(condition_and=list(args))


def operator_or(*args: DemographicFilter) -> DemographicFilterOperator:
    """Match recipients satisfying any given condition."""
    return DemographicFilterOperator(condition_or=list(args))


def operator_not(condition: DemographicFilter) -> DemographicFilterOperator:
    """Match recipients not satisfying the condition."""
    return DemographicFilterOperator(condition_not=condition)