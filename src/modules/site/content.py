# src/modules/site/content.py

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class NavItem:
    href: str
    label: str


@dataclass(frozen=True)
class Service:
    title: str
    problem: str
    benefits: str
    description: str


@dataclass(frozen=True)
class ProcessStep:
    title: str
    text: str


@dataclass(frozen=True)
class Stat:
    value: str
    label: str


@dataclass(frozen=True)
class Fact:
    term: str
    definition: str


NAV_ITEMS: Tuple[NavItem, ...] = (
    NavItem("#presentation", "Présentation"),
    NavItem("#services", "Services"),
    NavItem("#processus", "Processus"),
    NavItem("#credibilite", "Crédibilité"),
    NavItem("#devis", "Devis"),
    NavItem("#contact", "Contact"),
)

HERO_HIGHLIGHTS: Tuple[str, ...] = (
    "Profils pénuriques et postes stratégiques",
    "Approche directe confidentielle",
    "Évaluation et short-list qualifiée",
    "Accompagnement jusqu’au closing",
)

PRESENTATION_FACTS: Tuple[Fact, ...] = (
    Fact("Cible", "Entreprises qui recrutent, décideurs RH & business"),
    Fact("Zone", "Partout en France"),
    Fact("Engagement", "Sourcing confidentiel, suivi, et closing candidat"),
)

SERVICES: Tuple[Service, ...] = (
    Service(
        title="Identification de profils pénuriques ou stratégiques",
        problem="Vous manquez de visibilité sur les bons viviers.",
        benefits="Ciblage précis, gain de temps, meilleure adéquation au poste.",
        description="Cartographie du marché et définition d’une short-list réaliste et performante.",
    ),
    Service(
        title="Sourcing confidentiel et discret",
        problem="Votre recrutement doit rester sensible ou non public.",
        benefits="Approche maîtrisée, confidentialité, image employeur protégée.",
        description="Approche directe adaptée à vos enjeux et à la maturité du marché.",
    ),
    Service(
        title="Prise de contact personnalisée",
        problem="Les candidats sollicités sont sur-sollicités.",
        benefits="Meilleur taux de réponse, échanges qualitatifs, engagement.",
        description="Pitch ajusté au profil et au contexte pour initier une conversation utile.",
    ),
    Service(
        title="Qualification approfondie des motivations",
        problem="Les signaux d’alerte apparaissent trop tard.",
        benefits="Moins de refus, décision plus sûre, recrutement durable.",
        description="Évaluation des motivations, contraintes, attentes et critères de décision.",
    ),
    Service(
        title="Suivi du processus et closing candidat",
        problem="Le process se dégrade entre les étapes.",
        benefits="Fluidité, coordination, sécurisation de l’acceptation.",
        description="Suivi rapproché, feedbacks et accompagnement jusqu’à la signature.",
    ),
)

PROCESS_STEPS: Tuple[ProcessStep, ...] = (
    ProcessStep(
        "Analyse du besoin et du contexte",
        "Clarification du poste, enjeux, critères, contraintes et calendrier.",
    ),
    ProcessStep(
        "Définition de la stratégie de sourcing",
        "Choix des canaux, ciblage, éléments de message et plan d’attaque.",
    ),
    ProcessStep(
        "Approche directe et confidentielle",
        "Approche discrète et personnalisée auprès des bons profils.",
    ),
    ProcessStep(
        "Évaluation et short-list qualifiée",
        "Entretiens, validation des motivations et synthèses exploitables.",
    ),
    ProcessStep(
        "Accompagnement jusqu’au closing",
        "Suivi des étapes, gestion des attentes et sécurisation de l’acceptation.",
    ),
)

CREDIBILITY_STATS: Tuple[Stat, ...] = (
    Stat("3 ans", "d’expérience"),
    Stat("+200", "recrutements réalisés en 3 ans"),
    Stat(
        "JO Paris",
        "accompagnement de l’organisation sur le recrutement du personnel (avant et durant l’évènement)",
    ),
)

PRIVACY_POLICY: Tuple[str, ...] = (
    "Les informations transmises via le formulaire (nom, entreprise, email professionnel, "
    "téléphone) sont utilisées uniquement pour traiter votre demande et vous recontacter.",
    "Les données sont envoyées à un prestataire tiers de gestion de formulaires (selon la "
    "configuration) et ne sont pas stockées sur ce site.",
    "Base légale : intérêt légitime (répondre à une demande entrante). Durée de conservation : "
    "le temps nécessaire au traitement de votre demande, selon la politique du prestataire tiers.",
    "Vous pouvez exercer vos droits (accès, rectification, suppression) en nous contactant via "
    "le formulaire.",
)

CONSENT_NOTICE = (
    "En soumettant ce formulaire, vous acceptez que vos informations soient utilisées "
    "uniquement pour vous recontacter au sujet de votre demande. Aucune donnée n’est "
    "stockée sur ce site."
)

DEVELOPER_CREDIT = NavItem("https://bafode-cisse.vercel.app/", "Développement par Karlsefni")
