"""
Bilingual labels for actions, resources and operations.

Actions have explicit English and French labels. English resource labels are
the humanized enum key; French resources use an override table. Anything
missing from a table falls back to the humanized key.
"""

from typing import Dict, Union

from ..types.common import Locale, LocaleLike, DEFAULT_LOCALE, resolve_locale
from ..types.errors import ValidationError
from .actions import Action
from .operation import Operation
from .resources import Resource


ORDER_ACTION_RESOURCE = "action-resource"
ORDER_RESOURCE_ACTION = "resource-action"


EN_ACTION_LABELS: Dict[Action, str] = {
    Action.CREATE: 'Create',
    Action.READ: 'Read',
    Action.UPDATE: 'Update',
    Action.DELETE: 'Delete',
    Action.PUT: 'Put',
    Action.LIST: 'List',
    Action.MANAGE: 'Manage',
    Action.VIEW: 'View',
    Action.SEARCH: 'Search',
    Action.GRANT: 'Grant',
    Action.REVOKE: 'Revoke',
    Action.PRESCRIBE: 'Prescribe',
    Action.DIAGNOSE: 'Diagnose',
    Action.SCHEDULE: 'Schedule',
    Action.CANCEL: 'Cancel',
    Action.APPROVE: 'Approve',
    Action.REJECT: 'Reject',
    Action.SIGN: 'Sign',
    Action.VERIFY: 'Verify',
    Action.RECOVER: 'Recover',
    Action.DISABLE: 'Disable',
    Action.SET_MEDICAL_SERVICE_STATUS: 'Set medical service status',
    Action.SET_MEDICAL_SERVICE_FEES: 'Set medical service fees',
    Action.UPDATE_STATUS: 'Update status',
    Action.VIEW_PATIENTS: 'View patients',
    Action.PUT_PATIENT_PAYMENT: 'Put patient payment',
    Action.DELETE_PATIENT_PAYMENT: 'Delete patient payment',
    Action.EXPORT: 'Export',
    Action.IMPORT: 'Import',
    Action.ARCHIVE: 'Archive',
    Action.RESTORE: 'Restore',
    Action.SHARE: 'Share',
    Action.DOWNLOAD: 'Download',
    Action.UPLOAD: 'Upload',
    Action.LOGIN: 'Login',
    Action.LOGOUT: 'Logout',
    Action.CONFIGURE: 'Configure',
    Action.AUDIT: 'Audit',
}

FR_ACTION_LABELS: Dict[Action, str] = {
    Action.CREATE: 'Créer',
    Action.READ: 'Lire',
    Action.UPDATE: 'Mettre à jour',
    Action.DELETE: 'Supprimer',
    Action.PUT: 'Mettre',
    Action.LIST: 'Lister',
    Action.MANAGE: 'Gérer',
    Action.VIEW: 'Voir',
    Action.SEARCH: 'Rechercher',
    Action.GRANT: 'Accorder',
    Action.REVOKE: 'Révoquer',
    Action.PRESCRIBE: 'Prescrire',
    Action.DIAGNOSE: 'Diagnostiquer',
    Action.SCHEDULE: 'Planifier',
    Action.CANCEL: 'Annuler',
    Action.APPROVE: 'Approuver',
    Action.REJECT: 'Rejeter',
    Action.SIGN: 'Signer',
    Action.VERIFY: 'Vérifier',
    Action.RECOVER: 'Récupérer',
    Action.DISABLE: 'Désactiver',
    Action.SET_MEDICAL_SERVICE_STATUS: 'Définir le statut du service médical',
    Action.SET_MEDICAL_SERVICE_FEES: 'Définir les frais du service médical',
    Action.UPDATE_STATUS: 'Mettre à jour le statut',
    Action.VIEW_PATIENTS: 'Voir les patients',
    Action.PUT_PATIENT_PAYMENT: 'Enregistrer le paiement patient',
    Action.DELETE_PATIENT_PAYMENT: 'Supprimer le paiement patient',
    Action.EXPORT: 'Exporter',
    Action.IMPORT: 'Importer',
    Action.ARCHIVE: 'Archiver',
    Action.RESTORE: 'Restaurer',
    Action.SHARE: 'Partager',
    Action.DOWNLOAD: 'Télécharger',
    Action.UPLOAD: 'Téléverser',
    Action.LOGIN: 'Connexion',
    Action.LOGOUT: 'Déconnexion',
    Action.CONFIGURE: 'Configurer',
    Action.AUDIT: 'Auditer',
}

FR_RESOURCE_LABELS: Dict[Resource, str] = {
    Resource.ACCOUNT: 'Compte',
    Resource.ACCOUNT_OWNERSHIP: 'Propriété du compte',
    Resource.ACCOUNT_PREFERENCES: 'Préférences du compte',
    Resource.USER: 'Utilisateur',
    Resource.CONTACT: 'Contact',
    Resource.PATIENT: 'Patient',
    Resource.PATIENT_MEDICAL_NOTES: 'Notes médicales du patient',
    Resource.PATIENT_MEDICAL_PROPERTIES: 'Propriétés médicales du patient',
    Resource.PATIENT_PUBLIC_PROPERTIES: 'Propriétés publiques du patient',
    Resource.PATIENT_PAYMENT: 'Paiement du patient',
    Resource.MEDICAL_SERVICE: 'Service médical',
    Resource.MEDICAL_SERVICE_NOTE: 'Note du service médical',
    Resource.MEDICAL_SERVICE_SCHEDULE: 'Planification du service médical',
    Resource.MEDICAL_SERVICE_FEES: 'Frais du service médical',
    Resource.MEDICAL_SERVICE_STATUS: 'Statut du service médical',
    Resource.MEDICAL_NOTE: 'Note médicale',
    Resource.MEDICAL_RECORD: 'Dossier médical',
    Resource.MEDICAL_HISTORY: 'Antécédents médicaux',
    Resource.MEDICAL_HISTORY_MODEL: "Modèle d'antécédents médicaux",
    Resource.PRESCRIPTION: 'Ordonnance',
    Resource.PRESCRIPTION_MODEL: "Modèle d'ordonnance",
    Resource.DIAGNOSIS: 'Diagnostic',
    Resource.OBSERVATION: 'Observation',
    Resource.MEDICATION: 'Médication',
    Resource.ALLERGY: 'Allergie',
    Resource.IMMUNIZATION: 'Vaccination',
    Resource.PROCEDURE: 'Procédure',
    Resource.CLINICAL_NOTE: 'Note clinique',
    Resource.VITAL_SIGNS: 'Signes vitaux',
    Resource.MEASURE_MODEL: 'Modèle de mesure',
    Resource.CALCULATED_MEASURE_MODEL: 'Modèle de mesure calculée',
    Resource.UPLOADED_DOCUMENT: 'Document téléversé',
    Resource.DOCUMENT_LAYOUT: 'Mise en page du document',
    Resource.GENERATED_DOCUMENT: 'Document généré',
    Resource.DOCUMENT_MODEL: 'Modèle de document',
    Resource.SNIPPET: 'Extrait',
    Resource.LOCATION: 'Lieu',
    Resource.TASK_TYPE: 'Type de tâche',
    Resource.LAB_RESULT: 'Résultat de laboratoire',
    Resource.IMAGING: 'Imagerie',
    Resource.MEMBERSHIP: 'Adhésion',
    Resource.SETTINGS: 'Paramètres',
    Resource.NOTIFICATION: 'Notification',
    Resource.REPORT: 'Rapport',
    Resource.AUDIT_LOG: "Journal d'audit",
    Resource.SYSTEM: 'Système',
    Resource.PUBLIC_RESOURCE: 'Ressource publique',
    Resource.MEDICAL_RESOURCE: 'Ressource médicale',
}


def humanize_key(key: str) -> str:
    """Turn an enum key like ACCOUNT_OWNERSHIP into 'Account Ownership'."""
    return ' '.join(word.capitalize() for word in str(key).lower().split('_'))


def get_action_label(action: Action, locale: LocaleLike = DEFAULT_LOCALE) -> str:
    try:
        action = Action(action)
    except ValueError:
        raise ValidationError("Unknown action", field="action", value=action) from None
    table = FR_ACTION_LABELS if resolve_locale(locale) is Locale.FR_FR else EN_ACTION_LABELS
    return table.get(action, humanize_key(action.value))


def get_resource_label(resource: Resource, locale: LocaleLike = DEFAULT_LOCALE) -> str:
    try:
        resource = Resource(resource)
    except ValueError:
        raise ValidationError("Unknown resource", field="resource", value=resource) from None
    if resolve_locale(locale) is Locale.FR_FR:
        return FR_RESOURCE_LABELS.get(resource, humanize_key(resource.value))
    return humanize_key(resource.value)


def get_operation_label(
    operation: Union[Operation, str],
    locale: LocaleLike = DEFAULT_LOCALE,
    order: str = ORDER_ACTION_RESOURCE,
    separator: str = ' '
) -> str:
    """
    Build a display label for an operation.

    Args:
        operation: Operation instance or RESOURCE:ACTION string
        locale: Display language
        order: "action-resource" (default) or "resource-action"
        separator: Text placed between the two parts

    Returns:
        The label, or an empty string when the operation string is invalid
    """
    if order not in (ORDER_ACTION_RESOURCE, ORDER_RESOURCE_ACTION):
        raise ValueError(f"Unsupported label order: {order}")

    locale = resolve_locale(locale)
    op = Operation.from_string(operation) if isinstance(operation, str) else operation
    if op is None:
        return ''

    action_label = get_action_label(op.action, locale)
    resource_label = get_resource_label(op.resource, locale)
    if order == ORDER_RESOURCE_ACTION:
        return f"{resource_label}{separator}{action_label}"
    return f"{action_label}{separator}{resource_label}"
