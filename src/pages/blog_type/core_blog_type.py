from src.pages.forms_common import FormMessages, ListMessages

MESSAGES = FormMessages(
    created="Tipo de blog creado",
    updated="Tipo de blog actualizado",
    create_failed="No se pudo crear el tipo de blog",
    update_failed="No se pudo actualizar el tipo de blog",
    load_failed="No se pudo cargar el tipo de blog",
)
LIST_MESSAGES = ListMessages(
    noun="el tipo de blog",
    deleted="Tipo de blog eliminado",
    delete_failed="No se pudo eliminar el tipo de blog",
    load_failed="No se pudo cargar la lista de tipos de blog",
)
