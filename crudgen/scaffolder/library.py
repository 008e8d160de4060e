"""Fragment template library and token substitution engine.

Every fragment of the generated Livewire components comes from one of the
named templates below.  A template declares the closed set of ``##TOKEN##``
placeholders it uses; :func:`render_fragment` refuses a substitution mapping
that does not supply exactly that set, while :func:`render` is the bare
literal replacement used underneath.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping

MARKER = "##"

_MARKER_RE = re.compile(r"##([A-Z][A-Z0-9_]*)##")


class TemplateContractError(ValueError):
    """Raised when a caller supplies the wrong placeholder set for a template."""


@dataclass(frozen=True)
class FragmentTemplate:
    """A named template text with its declared placeholder names."""

    name: str
    text: str
    placeholders: frozenset[str] = field(default_factory=frozenset)

    def markers(self) -> set[str]:
        """Return the placeholder names that actually occur in ``text``."""
        return set(_MARKER_RE.findall(self.text))


# ---------------------------------------------------------------------------
# Substitution engine
# ---------------------------------------------------------------------------


def render(template: str, substitutions: Mapping[str, str]) -> str:
    """Replace every ``##NAME##`` marker whose name is in *substitutions*.

    Replacement is a single pass over *template*: replacement values are never
    re-scanned, so a value that itself contains a marker is emitted verbatim.
    Markers without a substitution are left untouched.

    Examples::

        render("Hi ##NAME##!", {"NAME": "Ada"})   -> "Hi Ada!"
        render("##A## ##B##", {"A": "##B##"})     -> "##B## ##B##"
    """
    if not substitutions:
        return template
    names = sorted(substitutions, key=len, reverse=True)
    pattern = re.compile(
        MARKER + "(" + "|".join(re.escape(n) for n in names) + ")" + MARKER
    )
    return pattern.sub(lambda m: substitutions[m.group(1)], template)


def render_fragment(template: FragmentTemplate, **values: str) -> str:
    """Render a library template, enforcing its declared placeholder set.

    Raises:
        TemplateContractError: If *values* does not name exactly the
            template's placeholders.
    """
    supplied = set(values)
    if supplied != template.placeholders:
        missing = sorted(template.placeholders - supplied)
        extra = sorted(supplied - template.placeholders)
        raise TemplateContractError(
            f"Template {template.name!r}: missing {missing}, unexpected {extra}"
        )
    return render(template.text, values)


def _template(name: str, text: str, *placeholders: str) -> FragmentTemplate:
    return FragmentTemplate(name=name, text=text, placeholders=frozenset(placeholders))


# ---------------------------------------------------------------------------
# Parent (list) component
# ---------------------------------------------------------------------------

SORTING_VARS = _template(
    "sorting_vars",
    """
    public $sortBy = '##SORT_COLUMN##';
    public $sortAsc = true;""",
    "SORT_COLUMN",
)

SORTING_QUERY = _template(
    "sorting_query",
    """
            ->orderBy($this->sortBy, $this->sortAsc ? 'ASC' : 'DESC')""",
)

SORTING_METHOD = _template(
    "sorting_method",
    """

    public function sortBy($field)
    {
        if ($field == $this->sortBy) {
            $this->sortAsc = !$this->sortAsc;
        }
        $this->sortBy = $field;
    }""",
)

SEARCHING_VARS = _template(
    "searching_vars",
    """
    public $q;""",
)

SEARCHING_QUERY = _template(
    "searching_query",
    """
            ->when($this->q, function ($query) {
                return $query->where(function ($query) {
                    ##SEARCH_QUERY##;
                });
            })""",
    "SEARCH_QUERY",
)

SEARCHING_QUERY_WHERE = _template(
    "searching_query_where",
    "##FIRST##('##COLUMN##', 'like', '%' . $this->q . '%')",
    "FIRST",
    "COLUMN",
)

SEARCHING_METHOD = _template(
    "searching_method",
    """

    public function updatingQ()
    {
        $this->resetPage();
    }""",
)

PAGINATION_VARS = _template(
    "pagination_vars",
    """
    public $perPage = ##PER_PAGE##;""",
    "PER_PAGE",
)

PAGINATION_DROPDOWN_METHOD = _template(
    "pagination_dropdown_method",
    """

    public function updatingPerPage()
    {
        $this->resetPage();
    }""",
)

# ---------------------------------------------------------------------------
# Child (form) component
# ---------------------------------------------------------------------------

CHILD_LISTENERS = _template(
    "child_listeners",
    """
    protected $listeners = [
        '##DELETE_LISTENER##',
        '##ADD_LISTENER##',
        '##EDIT_LISTENER##',
    ];""",
    "DELETE_LISTENER",
    "ADD_LISTENER",
    "EDIT_LISTENER",
)

CHILD_ITEM = _template(
    "child_item",
    """
    public $item;
    public $primaryKey;""",
)

CHILD_RULES = _template(
    "child_rules",
    """
    protected $rules = [##RULES##
    ];""",
    "RULES",
)

CHILD_VALIDATION_ATTRIBUTES = _template(
    "child_validation_attributes",
    """
    protected $validationAttributes = [##ATTRIBUTES##
    ];""",
    "ATTRIBUTES",
)

CHILD_FIELD = _template(
    "child_field",
    "'item.##COLUMN_NAME##' => '##VALUE##',",
    "COLUMN_NAME",
    "VALUE",
)

DELETE_VARS = _template(
    "delete_vars",
    """
    public $confirmingItemDeletion = false;""",
)

DELETE_METHOD = _template(
    "delete_method",
    """

    public function showDeleteForm($id)
    {
        $this->confirmingItemDeletion = true;
        $this->primaryKey = $id;
    }

    public function deleteItem()
    {
        ##MODEL##::destroy($this->primaryKey);
        $this->confirmingItemDeletion = false;
        $this->primaryKey = '';
        $this->reset(['item']);
        $this->emitTo('##COMPONENT_NAME##', 'refresh');##FLASH_MESSAGE##
    }""",
    "MODEL",
    "COMPONENT_NAME",
    "FLASH_MESSAGE",
)

ADD_VARS = _template(
    "add_vars",
    """
    public $confirmingItemCreation = false;""",
)

CREATE_FIELD = _template(
    "create_field",
    "$this->item['##COLUMN##'] = ##DEFAULT_VALUE##;",
    "COLUMN",
    "DEFAULT_VALUE",
)

ADD_METHOD = _template(
    "add_method",
    """

    public function showCreateForm()
    {
        $this->confirmingItemCreation = true;
        $this->resetErrorBag();
        $this->reset(['item']);##CREATE_FIELDS##
    }

    public function createItem()
    {
        $this->validate();
        ##MODEL##::create($this->item);
        $this->confirmingItemCreation = false;
        $this->emitTo('##COMPONENT_NAME##', 'refresh');##FLASH_MESSAGE##
    }""",
    "MODEL",
    "COMPONENT_NAME",
    "CREATE_FIELDS",
    "FLASH_MESSAGE",
)

EDIT_VARS = _template(
    "edit_vars",
    """
    public $confirmingItemEdit = false;""",
)

EDIT_METHOD = _template(
    "edit_method",
    """

    public function showEditForm($id)
    {
        $this->resetErrorBag();
        $this->primaryKey = $id;
        $this->item = ##MODEL##::findOrFail($id)->toArray();
        $this->confirmingItemEdit = true;
    }

    public function editItem()
    {
        $this->validate();
        ##MODEL##::findOrFail($this->primaryKey)->update($this->item);
        $this->confirmingItemEdit = false;
        $this->primaryKey = '';
        $this->emitTo('##COMPONENT_NAME##', 'refresh');##FLASH_MESSAGE##
    }""",
    "MODEL",
    "COMPONENT_NAME",
    "FLASH_MESSAGE",
)

FLASH_TRIGGER = _template(
    "flash_trigger",
    """
        $this->emitTo('livewire-toast', 'show', '##MESSAGE##');""",
    "MESSAGE",
)


LIBRARY: dict[str, FragmentTemplate] = {
    t.name: t
    for t in (
        SORTING_VARS,
        SORTING_QUERY,
        SORTING_METHOD,
        SEARCHING_VARS,
        SEARCHING_QUERY,
        SEARCHING_QUERY_WHERE,
        SEARCHING_METHOD,
        PAGINATION_VARS,
        PAGINATION_DROPDOWN_METHOD,
        CHILD_LISTENERS,
        CHILD_ITEM,
        CHILD_RULES,
        CHILD_VALIDATION_ATTRIBUTES,
        CHILD_FIELD,
        DELETE_VARS,
        DELETE_METHOD,
        ADD_VARS,
        CREATE_FIELD,
        ADD_METHOD,
        EDIT_VARS,
        EDIT_METHOD,
        FLASH_TRIGGER,
    )
}
