"""Template data builders."""

from sncf_departures.adapters.web.builders.template_data_builder import TemplateDataBuilder

__all__ = ["TemplateDataBuilder"]
