from src.pages.forms_common import FormMessages, ListMessages

MESSAGES = FormMessages(
    created="Habilidad hija creada",
    updated="Habilidad hija actualizada",
    create_failed="No se pudo crear la habilidad hija",
    update_failed="No se pudo actualizar la habilidad hija",
    load_failed="No se pudo cargar la habilidad hija",
)
LIST_MESSAGES = ListMessages(
    noun="la habilidad",
    deleted="Habilidad hija eliminada",
    delete_failed="No se pudo eliminar la habilidad hija",
    load_failed="No se pudo cargar la lista de habilidades hijas",
)
