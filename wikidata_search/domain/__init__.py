from wikidata_search.domain.models import AppInfo, Entity, QueryRequest, ResultMeta

__all__ = ["AppInfo", "Entity", "QueryRequest", "ResultMeta"]
