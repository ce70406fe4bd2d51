from solr_indexer.pipeline.fetcher import RecordFetcher
from solr_indexer.pipeline.query import build_query


def test_build_query_uses_positional_placeholder():
    assert build_query("T", "a,b", "id") == "SELECT a,b FROM T WHERE id = ?"


def test_build_query_interpolates_configuration_verbatim():
    sql = build_query("public.items", "sku, title ,price", "item_id")
    assert sql == "SELECT sku, title ,price FROM public.items WHERE item_id = ?"


def test_build_query_accepts_driver_placeholder():
    sql = build_query("items", "sku,title", "id", placeholder=RecordFetcher.placeholder)
    assert sql == "SELECT sku,title FROM items WHERE id = %s"


def test_build_query_doubles_percent_for_format_placeholder():
    sql = build_query(
        "items", "replace(title,'%','')", "id", placeholder=RecordFetcher.placeholder
    )
    assert sql == "SELECT replace(title,'%%','') FROM items WHERE id = %s"


def test_build_query_keeps_percent_for_qmark_placeholder():
    sql = build_query("items", "replace(title,'%','')", "id")
    assert sql == "SELECT replace(title,'%','') FROM items WHERE id = ?"
