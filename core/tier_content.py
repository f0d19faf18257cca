from models.assessment import Tier, TierContent

# Headings shown above each block of a tier result
SECTION_TITLES = {
    "implications":   "Implications légales",
    "obligations":    "Obligations réglementaires",
    "timeline":       "Calendrier d'application",
    "accountability": "Responsabilité des dirigeants",
    "positioning":    "Recommandation stratégique",
}

TIER_CONTENT = {
    Tier.TIER_1: TierContent(
        label="Exposition Limitée",
        title="Niveau 1 : Exposition Réglementaire Limitée",
        implications=(
            "Votre structure présente une exposition réduite aux obligations strictes de la "
            "Directive NIS2. Cependant, la vigilance reste de mise concernant la chaîne de valeur."
        ),
        obligations=[
            "Obligations de sécurité de base selon l'article 21 de la Directive NIS2",
            "Respect des mesures de gestion des risques proportionnées à votre taille",
            "Veille cyber réglementaire via le Centre pour la Cybersécurité belge (CCB)",
        ],
        timeline=(
            "La transposition belge est effective depuis octobre 2024. Aucune obligation de "
            "signalement 24h ne s'applique à votre catégorie, sauf incident majeur."
        ),
        accountability=(
            "Responsabilité des dirigeants encadrée par le droit commun. Pas de sanctions "
            "administratives spécifiques NIS2, mais diligence requise."
        ),
        positioning=(
            "Opportunité de structurer progressivement votre gouvernance cyber pour anticiper "
            "l'évolution réglementaire et rassurer vos parties prenantes."
        ),
    ),
    Tier.TIER_2: TierContent(
        label="Exposition Importante",
        title="Niveau 2 : Entité Importante - Obligations Renforcées",
        implications=(
            "Votre structure relève potentiellement de la catégorie \"Entité Importante\" au sens "
            "de l'Annexe III de la Directive NIS2. Des obligations spécifiques s'appliquent."
        ),
        obligations=[
            "Signalement des incidents significatifs au CCB dans les 24 heures (article 23)",
            "Mise en place de mesures de gestion des risques cyber (article 21)",
            "Sécurisation de la chaîne d'approvisionnement (article 21)",
            "Audit de conformité périodique et documentation des mesures",
        ],
        timeline=(
            "Entrée en vigueur immédiate depuis la transposition belge d'octobre 2024. Première "
            "évaluation réglementaire attendue sous 12 mois."
        ),
        accountability=(
            "Responsabilité renforcée des dirigeants. Sanctions administratives jusqu'à 1,4% du "
            "CA mondial ou 7M€ selon la loi belge."
        ),
        positioning=(
            "Une structuration rapide de votre SMSI (Système de Management de la Sécurité de "
            "l'Information) est recommandée pour démontrer votre conformité proactive."
        ),
    ),
    Tier.TIER_3: TierContent(
        label="Exposition Critique",
        title="Niveau 3 : Exposition Élevée - Conformité Prioritaire",
        implications=(
            "Votre structure présente une exposition élevée aux obligations NIS2, potentiellement "
            "en tant qu'Entité Essentielle ou Importante à haut risque. Une action immédiate est "
            "requise."
        ),
        obligations=[
            "Obligation de signalement 24h au CCB pour tout incident significatif",
            "Audit de conformité annuel par un tiers accrédité",
            "Mesures de sécurité strictes : gestion des accès, chiffrement, MFA, plans de continuité",
            "Due diligence sur les fournisseurs critiques et chaîne d'approvisionnement",
            "Documentation exigible des mesures de gestion des risques",
        ],
        timeline=(
            "Conformité immédiate requise. La loi belge du 7 avril 2024 est applicable. Contrôles "
            "du CCB en cours de déploiement."
        ),
        accountability=(
            "Responsabilité personnelle des dirigeants exposée. Sanctions pénales et "
            "administratives sévères (jusqu'à 10M€ ou 2% du CA mondial)."
        ),
        positioning=(
            "La mise en conformité NIS2 constitue une priorité stratégique. Une approche "
            "structurée, potentiellement via certification ISO 27001, est fortement recommandée "
            "pour atténuer les risques juridiques et opérationnels."
        ),
    ),
}
