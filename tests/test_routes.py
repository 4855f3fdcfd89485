from trip_emissions.constants import DEFAULT_ROUTES
from trip_emissions.models import Found, NotFound, make_route_table
from trip_emissions.routes import resolve_distance, list_known_locations


def test_every_known_route_resolves_both_ways():
    print("Running test_every_known_route_resolves_both_ways...")
    for origin, destination, km in DEFAULT_ROUTES:
        assert resolve_distance(origin, destination) == Found(km), f"{origin} -> {destination}"
        assert resolve_distance(destination, origin) == Found(km), f"{destination} -> {origin}"
    print("PASS")


def test_lookup_is_trimmed_and_case_insensitive():
    assert resolve_distance("  são paulo, sp ", "RIO DE JANEIRO, RJ") == Found(430)
    assert resolve_distance("SÃO PAULO, SP", "rio de janeiro, rj") == Found(430)


def test_blank_or_unknown_names_are_not_found():
    assert isinstance(resolve_distance("", "Natal, RN"), NotFound)
    assert isinstance(resolve_distance("Natal, RN", ""), NotFound)
    assert isinstance(resolve_distance("   ", "Natal, RN"), NotFound)
    assert isinstance(resolve_distance(None, "Natal, RN"), NotFound)
    assert isinstance(resolve_distance("Unknown", "Unknown"), NotFound)
    # Both cities known, but no direct route between them
    assert isinstance(resolve_distance("Natal, RN", "Santos, SP"), NotFound)


def test_first_match_in_table_order_wins():
    routes = make_route_table([
        ("A", "B", 10),
        ("b", "a", 20),
        ("A", "B", 30),
    ])
    assert resolve_distance("A", "B", routes) == Found(10)
    assert resolve_distance("B", "A", routes) == Found(10)


def test_zero_distance_route_is_found():
    routes = make_route_table([("Here", "There", 0)])
    assert resolve_distance("here", "there", routes) == Found(0.0)


def test_known_locations_are_unique_and_complete():
    names = list_known_locations()
    expected = {r[0] for r in DEFAULT_ROUTES} | {r[1] for r in DEFAULT_ROUTES}
    assert len(names) == len(set(names))
    assert set(names) == expected
    assert names[0] == "Aracaju, SE"
    assert names[-1] == "Vitória, ES"


def test_known_locations_use_accent_aware_order():
    routes = make_route_table([
        ("Zeta", "Élan", 1),
        ("Fox", "Zeta", 2),
        ("São Luís", "Santos", 3),
        ("Salvador", "São Luís", 4),
    ])
    # Code-point order would put "Élan" after "Zeta" and "São" after "Santos"
    assert list_known_locations(routes) == ["Élan", "Fox", "Salvador", "Santos", "São Luís", "Zeta"]


def test_known_locations_keep_case_variants():
    routes = make_route_table([("Recife", "Natal", 1), ("recife", "Natal", 2)])
    names = list_known_locations(routes)
    assert "Recife" in names and "recife" in names
    assert len(names) == 3


def test_lowercase_variant_sorts_before_capitalized():
    routes = make_route_table([("Recife", "Natal", 1), ("recife", "Natal", 2)])
    assert list_known_locations(routes) == ["Natal", "recife", "Recife"]
