from wikidata_search.shell.adapter import Cancellable, ShellSearchAdapter
from wikidata_search.shell.extension import ProviderRegistry, WikidataExtension

__all__ = ["Cancellable", "ProviderRegistry", "ShellSearchAdapter", "WikidataExtension"]
