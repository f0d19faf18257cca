"""
Static questionnaire definition: prompt and option labels for each input step.
Display collaborators render these; the state machine never reads them.
"""

from models.assessment import EntitySize, GovernanceMaturity, ServiceSensitivity, Step

QUESTIONS = {
    Step.ENTITY_SIZE: {
        "title": "Taille de l'entité",
        "field": "entity_size",
        "prompt": "Quelle est la taille de votre organisation ?",
        "options": {
            EntitySize.SMALL: "Petite structure (moins de 50 personnes)",
            EntitySize.MEDIUM: "Moyenne entreprise (50 à 249 personnes)",
            EntitySize.LARGE: "Grande entreprise (250 personnes ou plus)",
        },
    },
    Step.SERVICE_SENSITIVITY: {
        "title": "Sensibilité des services",
        "field": "service_sensitivity",
        "prompt": "Quel est le niveau de sensibilité des services que vous fournissez ?",
        "options": {
            ServiceSensitivity.LOW: "Faible : services sans données critiques",
            ServiceSensitivity.MEDIUM: "Moyenne : données clients confidentielles",
            ServiceSensitivity.HIGH: "Élevée : secteur listé à l'Annexe III (juridique, comptable...)",
        },
    },
    Step.DIGITAL_INFRASTRUCTURE: {
        "title": "Infrastructure numérique",
        "field": "digital_infrastructure",
        "prompt": "Cochez les éléments qui s'appliquent à votre organisation",
        "flags": {
            "cloud": "Hébergement de données ou d'applications dans le cloud",
            "mfa": "Authentification multifacteur (MFA) activée",
            "incident_process": "Processus formalisé de gestion des incidents",
            "supply_chain": "Dépendance à des fournisseurs informatiques critiques",
        },
    },
    Step.GOVERNANCE_MATURITY: {
        "title": "Maturité de la gouvernance",
        "field": "governance_maturity",
        "prompt": "Comment qualifieriez-vous votre gouvernance cyber ?",
        "options": {
            GovernanceMaturity.NONE: "Aucune politique de sécurité formalisée",
            GovernanceMaturity.BASIC: "Mesures de base, non documentées",
            GovernanceMaturity.STRUCTURED: "Politique structurée et documentée",
            GovernanceMaturity.ISO: "Certification ISO 27001 ou équivalent",
        },
    },
}

INPUT_STEPS = [Step.ENTITY_SIZE, Step.SERVICE_SENSITIVITY,
               Step.DIGITAL_INFRASTRUCTURE, Step.GOVERNANCE_MATURITY]


def current_choice(step, answers):
    """Recorded answer for a step as typed at the prompt ('3', '2,3'), or None."""
    question = QUESTIONS[step]
    recorded = getattr(answers, question["field"])
    if "flags" in question:
        numbers = [str(i) for i, name in enumerate(question["flags"], 1) if getattr(recorded, name)]
        return ",".join(numbers) or None
    if recorded is None:
        return None
    return str(list(question["options"]).index(recorded) + 1)
