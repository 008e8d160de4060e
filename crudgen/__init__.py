"""crudgen -- scaffolds Livewire CRUD components from a declarative field list."""

__version__ = "0.1.0"
