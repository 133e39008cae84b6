import pytest

from jsonapi_consumer import MalformedPageLink, PaginationLinkTranslator, extract_page_number

BASE = "http://api.example/posts"


def local(page_number):
    return f"/posts?page={page_number}"


def link(page_number, size=25):
    return f"{BASE}?page[number]={page_number}&page[size]={size}"


def test_translates_next_and_last_to_local_urls():
    translator = PaginationLinkTranslator()
    page_links = {
        "next": "http://api.example/posts?page[number]=2&page[size]=25",
        "last": "http://api.example/posts?page[number]=15&page[size]=25",
    }

    assert translator.translate(page_links, local) == {
        "next": "/posts?page=2",
        "last": "/posts?page=15",
    }


def test_keeps_fixed_relation_order_regardless_of_input_order():
    page_links = {"last": link(9), "next": link(4), "previous": link(2), "first": link(1)}

    pager = PaginationLinkTranslator().translate(page_links, local)

    assert list(pager) == ["first", "previous", "next", "last"]


def test_output_matches_builder_applied_to_each_page_number():
    page_links = {"first": link(1), "previous": link(3), "next": link(5), "last": link(8)}

    pager = PaginationLinkTranslator().translate(page_links, local)

    assert pager == {
        relation: local(extract_page_number(url)) for relation, url in page_links.items()
    }


def test_only_present_relations_are_returned():
    pager = PaginationLinkTranslator().translate({"next": link(2), "last": link(3)}, local)

    assert set(pager) == {"next", "last"}


def test_non_pager_keys_and_null_links_are_ignored():
    page_links = {"self": link(1), "first": link(1), "prev": None, "next": link(2)}

    pager = PaginationLinkTranslator().translate(page_links, local)

    assert pager == {"first": "/posts?page=1", "next": "/posts?page=2"}


def test_prev_spelling_is_recognised_and_kept():
    pager = PaginationLinkTranslator().translate({"prev": link(3)}, local)

    assert pager == {"prev": "/posts?page=3"}


def test_empty_link_set_yields_empty_pager():
    assert PaginationLinkTranslator().translate({}, local) == {}


def test_translation_is_idempotent():
    translator = PaginationLinkTranslator()
    page_links = {"first": link(1), "next": link(2), "last": link(7)}

    assert translator.translate(page_links, local) == translator.translate(page_links, local)


def test_translator_is_callable():
    translator = PaginationLinkTranslator()

    assert translator({"next": link(2)}, local) == {"next": "/posts?page=2"}


def test_non_numeric_page_number_raises():
    with pytest.raises(MalformedPageLink) as excinfo:
        PaginationLinkTranslator().translate({"next": f"{BASE}?page[number]=abc"}, local)

    assert excinfo.value.relation == "next"
    assert excinfo.value.param == "page[number]"


def test_missing_page_number_raises():
    with pytest.raises(MalformedPageLink):
        PaginationLinkTranslator().translate({"last": f"{BASE}?page[size]=25"}, local)


@pytest.mark.parametrize("value", ["0", "-1", "", "1.5", "2a"])
def test_non_positive_or_non_integer_values_raise(value):
    with pytest.raises(MalformedPageLink):
        extract_page_number(f"{BASE}?page[number]={value}")


def test_oversized_page_number_raises_malformed_link():
    huge = "9" * 5000

    with pytest.raises(MalformedPageLink) as excinfo:
        PaginationLinkTranslator().translate({"next": f"{BASE}?page[number]={huge}"}, local)

    assert excinfo.value.relation == "next"


def test_first_occurrence_wins():
    assert extract_page_number(f"{BASE}?page[number]=4&page[number]=9") == 4


def test_percent_encoded_parameter_name_is_decoded():
    assert extract_page_number(f"{BASE}?page%5Bnumber%5D=6&page%5Bsize%5D=10") == 6


def test_custom_page_parameter():
    translator = PaginationLinkTranslator(page_param="page")

    assert translator.translate({"next": f"{BASE}?page=3&per_page=10"}, local) == {
        "next": "/posts?page=3"
    }


def test_malformed_page_link_is_a_value_error():
    with pytest.raises(ValueError):
        extract_page_number(BASE)
