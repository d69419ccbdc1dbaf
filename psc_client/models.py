from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # the service sends null where a field has no value
        if value is not None:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)


class Traveller(WireModel):
    bc: int = 0  # discount card, 0 - none
    typ: str = "E"  # adult
    alter: int = 25


class SearchRequest(WireModel):
    s: int  # origin station id
    d: int  # destination station id
    dt: str  # DD.MM.YY
    t: str  # HH:MM
    c: int = 2
    without_ice: bool = Field(default=False, alias="ohneICE")
    tct: int = 5  # minimum transfer time, minutes
    dur: int = 1440  # search window, minutes
    travellers: List[Traveller] = Field(default_factory=lambda: [Traveller()])
    sv: bool = True  # prefer fast routes
    v: str = "16040000"
    dir: str = "1"
    bic: bool = False
    device: str = "HANDY"
    os: str = "iOS_9.3.1"


class Offer(WireModel):
    t: str = ""
    c: str = ""
    p: str = ""  # price, comma decimal
    tt: str = ""
    zb: str = ""
    arq: str = ""
    ff: str = ""
    aix: str = ""
    sids: List[str] = Field(default_factory=list)
    pky: str = ""
    angnm: str = ""
    kotxt: str = ""


class LegTime(WireModel):
    day: str = Field(default="", alias="d")
    time: str = Field(default="", alias="t")
    utc: str = Field(default="", alias="m")  # epoch milliseconds


class Leg(WireModel):
    tid: str = ""
    lt: str = ""
    lt_short: str = Field(default="", alias="ltShort")
    s: str = ""  # origin station code
    sn: str = ""  # origin station name
    d: str = ""  # destination station code
    dn: str = ""  # destination station name
    tn: str = ""
    eg: str = ""
    dep: LegTime = Field(default_factory=LegTime)
    arr: LegTime = Field(default_factory=LegTime)
    pd: str = ""
    pa: str = ""
    rp: bool = False
    re: bool = False
    sp: bool = False


class Itinerary(WireModel):
    dir: str = ""
    sid: str = ""
    dt: str = ""
    dur: str = ""
    nt: str = ""
    nr_conn: bool = Field(default=False, alias="NZVerb")
    eg: str = ""
    trains: List[Leg] = Field(default_factory=list)


class Notice(WireModel):
    name: str = ""
    text: str = Field(default="", alias="hinweis")


class StationRef(WireModel):
    number: str = Field(default="", alias="nummer")
    name: str = ""


class FareResponse(WireModel):
    dir: str = ""
    offers: Dict[str, Offer] = Field(default_factory=dict, alias="angebote")
    connections: Dict[str, Itinerary] = Field(default_factory=dict, alias="verbindungen")
    notices: Dict[str, Notice] = Field(default_factory=dict, alias="peTexte")
    origin_stations: List[StationRef] = Field(default_factory=list, alias="sbf")
    destination_stations: List[StationRef] = Field(default_factory=list, alias="dbf")
    durations: Dict[str, str] = Field(default_factory=dict, alias="durs")
    prices: Dict[str, str] = Field(default_factory=dict)
    sp: bool = False
    device: str = ""
