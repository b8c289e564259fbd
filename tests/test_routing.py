from coursehub.navbar.routing import CATALOG_ROUTE, catalog_path, catalog_slug, match_route


def test_catalog_slug_lowercases_and_joins_words() -> None:
    assert catalog_slug("Web Development") == "web-development"
    assert catalog_slug("AI") == "ai"


def test_catalog_slug_collapses_whitespace_runs() -> None:
    assert catalog_slug("Data   Science") == "data-science"
    assert catalog_slug("  Cloud\tComputing ") == "cloud-computing"


def test_catalog_path() -> None:
    assert catalog_path("Web Development") == "/catalog/web-development"


def test_match_route_literal_paths() -> None:
    assert match_route("/", "/")
    assert match_route("/about", "/about")
    assert match_route("/about", "/about/")
    assert match_route("/about", "/About")
    assert not match_route("/about", "/contact")
    assert not match_route("/", "/about")


def test_match_route_parameter_segment() -> None:
    assert match_route(CATALOG_ROUTE, "/catalog/web-development")
    assert not match_route(CATALOG_ROUTE, "/catalog")
    assert not match_route(CATALOG_ROUTE, "/catalog/")
    assert not match_route(CATALOG_ROUTE, "/catalog/ai/extra")
    assert not match_route(CATALOG_ROUTE, "/courses/ai")


def test_match_route_without_pattern_never_matches() -> None:
    assert not match_route(None, "/")
    assert not match_route("", "/")
