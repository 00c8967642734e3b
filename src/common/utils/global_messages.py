
class GlobalMessages:
    # Contact form feedback
    SUBMISSION_SUCCESS = "Merci. Votre demande a bien été envoyée."
    SUBMISSION_FAILED = "L’envoi a échoué. Merci de vérifier vos informations et de réessayer."
    NETWORK_ERROR = "Une erreur réseau est survenue. Merci de réessayer dans un instant."
    GENERIC_ERROR = "Une erreur est survenue."
    INVALID_FIELDS = "Merci de compléter les champs obligatoires."

    # Contact form controls
    SUBMIT_LABEL = "Envoyer"
    SENDING_LABEL = "Envoi en cours…"

    # Health
    API_RUNNING = "Site is running"
