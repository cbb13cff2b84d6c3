"""Shared fixtures: a miniature Summer Olympics wiki served through respx.

Every page of the mini site lives in ``SITE`` keyed by path.  The ``wiki``
fixture mocks ``https://wiki.test`` at the httpx transport layer so that
``DocumentSource`` fetches these pages without any real network access;
any other path answers 404.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from medalwiki.queries import OlympicsQueries
from medalwiki.scraper.source import DocumentSource
from medalwiki.walker import PageGraphWalker

BASE_URL = "https://wiki.test"
HOME_PATH = "/wiki/Summer_Olympic_Games"
HOME_URL = BASE_URL + HOME_PATH


def _page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html><html><head>"
        f"<title>{title} - Wikipedia</title></head>"
        f'<body><div class="mw-parser-output">{body}</div></body></html>'
    )


def _heading(level: int, text: str) -> str:
    anchor = text.replace(" ", "_")
    return (
        f'<div class="mw-heading mw-heading{level}">'
        f'<h{level} id="{anchor}">{text}</h{level}>'
        '<span class="mw-editsection">[<a href="/edit">edit</a>]</span></div>'
    )


def _infobox(*rows: str) -> str:
    return '<table class="infobox"><tbody>' + "".join(rows) + "</tbody></table>"


def _row(label: str, value: str) -> str:
    return f'<tr><th scope="row" class="infobox-label">{label}</th><td class="infobox-data">{value}</td></tr>'


_HLISTS = "".join(f'<div class="hlist"><ul><li><a href="/wiki/Nav_{i}">Nav {i}</a></li></ul></div>' for i in range(5))

HOME = _page(
    "Summer Olympic Games",
    '<table class="sidebar"><tbody><tr><td>'
    '<a href="/wiki/List_of_Olympic_torch_relays" title="List of Olympic torch relays">Torch relays</a>'
    "</td></tr></tbody></table>"
    + _heading(2, "Sports")
    + '<table class="wikitable sortable"><tbody>'
    "<tr><th>Sport</th><th>Years</th></tr>"
    '<tr><td><a href="/wiki/Judo_at_the_Summer_Olympics">Judo</a></td><td>1964–</td></tr>'
    '<tr><td><a href="/wiki/Rowing_at_the_Summer_Olympics">Rowing</a></td><td>1900–</td></tr>'
    '<tr><td><a href="/wiki/Athletics_at_the_Summer_Olympics">Athletics</a></td><td>1896–</td></tr>'
    '<tr><td><a href="/wiki/Jeu_de_paume_at_the_Summer_Olympics">Jeu de paume</a></td><td>1908</td></tr>'
    "</tbody></table>"
    '<table class="wikitable"><tbody><tr><td>Hosts</td></tr></tbody></table>'
    '<table class="wikitable"><tbody><tr><td>Records</td></tr></tbody></table>'
    '<table class="wikitable"><tbody>'
    "<tr><th>Medal tables</th></tr>"
    '<tr><td><div class="plainlist"><ul>'
    '<li><a href="/wiki/2016_Summer_Olympics_medal_table">2016</a></li>'
    '<li><a href="/wiki/2020_Summer_Olympics_medal_table">2020</a></li>'
    "</ul></div></td></tr>"
    "</tbody></table>"
    + _HLISTS
    + '<div class="hlist"><ul>'
    '<li><a href="/wiki/2016_Summer_Olympics">2016</a></li>'
    '<li><a href="/wiki/2020_Summer_Olympics">2020</a></li>'
    "</ul></div>"
    '<p>See <a href="/wiki/List_of_participating_nations_at_the_Summer_Olympic_Games" '
    'title="List of participating nations at the Summer Olympic Games">participating nations</a>.</p>',
)

JUDO = _page(
    "Judo at the Summer Olympics",
    _infobox(_row("Governing body", '<a href="/wiki/International_Judo_Federation">IJF</a>'))
    + _heading(2, "History")
    + "<p>Judo debuted in 1964.</p>"
    + _heading(2, "Medal table")
    + "<p>As of 2020.</p><ul><li>Note</li></ul>"
    + '<table class="wikitable"><tbody>'
    "<tr><th>Rank</th><th>Nation</th><th>Gold</th><th>Silver</th><th>Bronze</th><th>Total</th></tr>"
    '<tr><td>1</td><td><a href="/wiki/Japan">Japan</a></td><td>2</td><td>1</td><td>0</td><td>3</td></tr>'
    '<tr><td>2</td><td><a href="/wiki/France">France</a></td><td>1</td><td>1</td><td>2</td><td>4</td></tr>'
    '<tr><td>3</td><td><a href="/wiki/Japan">Japan</a></td><td>1</td><td>2</td><td>2</td><td>5</td></tr>'
    "</tbody></table>",
)

ROWING = _page(
    "Rowing at the Summer Olympics",
    _infobox(_row("Governing body", '<a href="/wiki/World_Rowing">World Rowing</a>')),
)

ATHLETICS = _page(
    "Athletics at the Summer Olympics",
    _infobox(_row("Governing body", '<a href="/wiki/World_Athletics">World Athletics</a>')),
)

IJF = _page(
    "International Judo Federation",
    _infobox(_row("Headquarters", 'Lausanne, <a href="/wiki/Switzerland">Switzerland</a><sup>[1]</sup>')),
)

WORLD_ROWING = _page(
    "World Rowing",
    _infobox(_row("Headquarters", '<a href="/wiki/Lausanne">Lausanne</a>, <a href="/wiki/Switzerland">Switzerland</a>')),
)

WORLD_ATHLETICS = _page(
    "World Athletics",
    _infobox(_row("Headquarters", '<a href="/wiki/Monaco">Monaco</a>')),
)

MEDAL_TABLE_2020 = _page(
    "2020 Summer Olympics medal table",
    _heading(2, "Medal table")
    + '<table class="wikitable sortable"><tbody>'
    "<tr><th>Rank</th><th>NOC</th><th>Gold</th><th>Silver</th><th>Bronze</th><th>Total</th></tr>"
    '<tr><td>1</td><th><a href="/wiki/Japan_at_the_2020_Summer_Olympics">Japan</a></th>'
    "<td>27</td><td>14</td><td>17</td><td>58</td></tr>"
    '<tr><td>2</td><th><a href="/wiki/France_at_the_2020_Summer_Olympics">France</a></th>'
    "<td>10</td><td>12</td><td>11</td><td>33</td></tr>"
    '<tr><td>3</td><th><a href="/wiki/Kenya_at_the_2020_Summer_Olympics">Kenya</a></th>'
    "<td>4</td><td>4</td><td>2</td><td>10</td></tr>"
    '<tr><td colspan="6">Note</td></tr>'
    '<tr><th colspan="2">Totals (3 entries)</th><td>41</td><td>30</td><td>30</td><td>101</td></tr>'
    "</tbody></table>",
)

JAPAN_2020 = _page(
    "Japan at the 2020 Summer Olympics",
    _infobox(
        _row("NOC", '<a href="/wiki/Japanese_Olympic_Committee">Japanese Olympic Committee</a>'),
        _row(
            "Flag bearers (opening)",
            '<a href="/wiki/Yui_Susaki">Yui Susaki</a><br><a href="/wiki/Rui_Hachimura">Rui Hachimura</a>',
        ),
    ),
)

FRANCE_2020 = _page(
    "France at the 2020 Summer Olympics",
    _infobox(_row("NOC", '<a href="/wiki/CNOSF">CNOSF</a>')),
)

YUI_SUSAKI = _page(
    "Yui Susaki",
    _infobox(_row("Born", "30 June 1999 (age 27)<br>Chiba, Japan")),
)

RUI_HACHIMURA = _page(
    "Rui Hachimura",
    _infobox(
        _row("Born", "8 February 1998"),
        '<tr><th scope="row">Died</th><td>1 May 1990<br><a href="/wiki/Tokyo">Tokyo</a>, <i>Japan</i></td></tr>',
    ),
)

GAMES_2020 = _page(
    "2020 Summer Olympics",
    _heading(2, "Participating National Olympic Committees")
    + "<p>206 NOCs took part.</p>"
    + '<table class="wikitable"><tbody><tr><td><ul>'
    '<li><img src="//upload.wikimedia.org/flags/22px-Flag_of_Japan.svg.png"> <a href="/wiki/Japan">Japan</a></li>'
    '<li><img src="//upload.wikimedia.org/flags/22px-Flag_of_France.svg.png"> <a href="/wiki/France">France</a></li>'
    "<li>Refugee team</li>"
    "</ul></td></tr></tbody></table>"
    + _heading(2, "Medal count")
    + _heading(3, "Podium sweeps")
    + "<p>There were two podium sweeps.</p>"
    + '<table class="wikitable"><tbody>'
    "<tr><th>Date</th><th>Sport</th><th>Event</th><th>Team</th></tr>"
    "<tr><td>31 July</td><td>Athletics</td><td>Women's 100 metres</td>"
    '<td><a href="/wiki/Jamaica_at_the_2020_Summer_Olympics">Jamaica</a></td></tr>'
    "<tr><td>2 August</td><td>Cycling</td><td>Women's BMX</td>"
    '<td><a href="/wiki/Netherlands_at_the_2020_Summer_Olympics">Netherlands</a></td></tr>'
    "<tr><td>Cancelled</td></tr>"
    "</tbody></table>",
)

PARTICIPATING = _page(
    "List of participating nations at the Summer Olympic Games",
    '<table class="wikitable"><tbody>'
    "<tr><th>Nation</th><th>Code</th></tr>"
    '<tr><td bgcolor="#e0e0e0"><a href="/wiki/Soviet_Union">Soviet Union</a></td><td>URS</td></tr>'
    '<tr><td><a href="/wiki/France">France</a></td><td>FRA</td></tr>'
    '<tr><td bgcolor="#E0E0E0"><a href="/wiki/East_Germany">East Germany</a></td><td>GDR</td></tr>'
    '<tr><td>Unlinked</td><td bgcolor="#e0e0e0">X</td></tr>'
    "</tbody></table>",
)


def _relay_row(host: str, games: str, stops: str) -> str:
    return (
        "<tr><td>"
        f'<span class="flagicon"><a href="/wiki/{host}" title="{host}"><img src="//x/flag.png"></a></span> '
        f'<a href="/wiki/{games.replace(" ", "_")}_torch_relay">{games}</a>'
        f"</td><td>20,000 km</td><td>{stops}</td></tr>"
    )


TORCH_RELAYS = _page(
    "List of Olympic torch relays",
    '<table class="wikitable sortable"><tbody>'
    "<tr><th>Games</th><th>Distance</th><th>Route</th></tr>"
    + _relay_row(
        "Japan",
        "1964 Tokyo",
        '<a href="/wiki/Athens">Athens</a>, <a href="/wiki/Hong_Kong">Hong Kong</a>, '
        '<i><a href="/wiki/Tokyo">Tokyo</a></i>',
    )
    + _relay_row(
        "Japan",
        "2020 Tokyo",
        '<a href="/wiki/Tokyo">Tokyo</a>, <a href="/wiki/Osaka">Osaka</a>, '
        '<a href="/wiki/Athens">Athens</a>',
    )
    + _relay_row("Japan", "1998 Nagano", '<a href="/wiki/Nagano">Nagano</a>')
    + _relay_row(
        "Greece",
        "2004 Athens",
        '<a href="/wiki/Athens">Athens</a>, <a href="/wiki/Piraeus">Piraeus</a>',
    )
    + "</tbody></table>",
)

TOKYO = _page("Tokyo", _infobox(_row("Country", '<a href="/wiki/Japan">Japan</a>')))
OSAKA = _page(
    "Osaka",
    _infobox(_row('<a href="/wiki/Prefectures_of_Japan">Prefecture</a>', '<a href="/wiki/Osaka_Prefecture">Osaka</a>')),
)
NAGANO = _page(
    "Nagano",
    _infobox(_row('<a href="/wiki/Prefectures_of_Japan">Prefecture</a>', '<a href="/wiki/Nagano_Prefecture">Nagano</a>')),
)
ATHENS = _page(
    "Athens",
    _infobox(_row("Country", '<span class="flagicon"><a href="/wiki/Greece"></a></span> <a href="/wiki/Greece">Greece</a>')),
)
HONG_KONG = _page(
    "Hong Kong",
    _infobox(
        _row(
            '<a href="/wiki/Sovereign_state">Sovereign state</a>',
            '<a href="/wiki/China">People\'s Republic of China</a>',
        )
    ),
)

SITE: dict[str, str] = {
    HOME_PATH: HOME,
    "/wiki/Judo_at_the_Summer_Olympics": JUDO,
    "/wiki/Rowing_at_the_Summer_Olympics": ROWING,
    "/wiki/Athletics_at_the_Summer_Olympics": ATHLETICS,
    "/wiki/International_Judo_Federation": IJF,
    "/wiki/World_Rowing": WORLD_ROWING,
    "/wiki/World_Athletics": WORLD_ATHLETICS,
    "/wiki/2020_Summer_Olympics_medal_table": MEDAL_TABLE_2020,
    "/wiki/Japan_at_the_2020_Summer_Olympics": JAPAN_2020,
    "/wiki/France_at_the_2020_Summer_Olympics": FRANCE_2020,
    "/wiki/Yui_Susaki": YUI_SUSAKI,
    "/wiki/Rui_Hachimura": RUI_HACHIMURA,
    "/wiki/2020_Summer_Olympics": GAMES_2020,
    "/wiki/List_of_participating_nations_at_the_Summer_Olympic_Games": PARTICIPATING,
    "/wiki/List_of_Olympic_torch_relays": TORCH_RELAYS,
    "/wiki/Tokyo": TOKYO,
    "/wiki/Osaka": OSAKA,
    "/wiki/Nagano": NAGANO,
    "/wiki/Athens": ATHENS,
    "/wiki/Hong_Kong": HONG_KONG,
}


@pytest.fixture
def wiki():
    """Serve ``SITE`` at ``BASE_URL``; yields the respx router."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        for path, html in SITE.items():
            router.get(path).mock(return_value=httpx.Response(200, text=html))
        router.route().mock(return_value=httpx.Response(404, text="Not Found"))
        yield router


@pytest.fixture
def source(wiki) -> DocumentSource:
    return DocumentSource(BASE_URL)


@pytest.fixture
def walker(source) -> PageGraphWalker:
    return PageGraphWalker(source, max_workers=3)


@pytest.fixture
def queries(walker) -> OlympicsQueries:
    return OlympicsQueries(walker, HOME_URL)
