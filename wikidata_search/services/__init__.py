from wikidata_search.services.api_client import ApiClient
from wikidata_search.services.result_cache import ResultCache
from wikidata_search.services.search_provider import SearchProvider

__all__ = ["ApiClient", "ResultCache", "SearchProvider"]
