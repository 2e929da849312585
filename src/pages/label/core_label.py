from src.pages.forms_common import FormMessages, ListMessages

# Labels are created and deleted, never edited in place.
MESSAGES = FormMessages(
    created="Label creado",
    updated="Label creado",
    create_failed="No se pudo crear el label",
    update_failed="No se pudo crear el label",
    load_failed="No se pudo cargar el label",
)
LIST_MESSAGES = ListMessages(
    noun="el label",
    deleted="Etiqueta eliminada",
    delete_failed="No se pudo eliminar el label",
    load_failed="No se pudo cargar la lista de labels",
    in_use="El label está relacionado. Elimina la relación antes de borrar.",
)
