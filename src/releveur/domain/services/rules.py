"""Merchant / label dictionary used to categorize transactions.

Rules are tried top to bottom and the first match wins, so keep the more
specific keywords above the generic ones (``CHEQUE`` and ``RETRAIT DAB`` come
last on purpose). A replacement table can be given as JSON, see
``load_rules``:

    {
      "credit_default": ["VIREMENT EXTERNE", "OTHERS"],
      "debit_default": null,
      "rules": [
        {"credit": false, "keywords": ["NETFLIX"], "category1": "LOISIRS", "category2": "NUMERIQUE"}
      ]
    }
"""

import json
from pathlib import Path

from releveur.domain.services.categorizer import CategoryRule, CategoryRules


def _credit(keywords, category1, category2):
    return CategoryRule(True, tuple(keywords), category1, category2, label1_prefix='VIREMENT')


def _debit(keywords, category1, category2):
    return CategoryRule(False, tuple(keywords), category1, category2)


DEFAULT_RULES = CategoryRules(
    rules=(
        _credit(['CAF'], 'VIREMENT EXTERNE', 'CAF'),
        _credit(['ELECTRICITE'], 'VIREMENT EXTERNE', 'OTHERS'),
        _credit(['DGFIP'], 'VIREMENT EXTERNE', 'OTHERS'),
        _credit(['MAILLARD'], 'VIREMENT INTERNE', 'ANTOINE'),
        _credit(['POUZOULET'], 'VIREMENT INTERNE', 'BULLE'),

        _debit(['AMAZON', 'AMZ DIGITAL'], 'ACHATS', 'AMAZON'),
        _debit(['EBAY'], 'ACHATS', 'EBAY'),
        _debit(['CAROLL', 'ZALANDO', 'DAMART', 'LA HALLE', 'SAINTJAMESOUTL'], 'ACHATS', 'VETEMENTS'),
        _debit([
            'ALICE DELICE', 'DECATHLON', 'REDBUBBLE.COM', 'MARIONNAUD', "CHEMINS D'ENCR", "LES P'TITS PAP",
            'MATHON.FR',
        ], 'ACHATS', 'DIVERS'),
        _debit(['BELIN EDUCATIO', 'NUMWORKS'], 'ACHATS', 'EDUCATION'),

        _debit(['MAISON ET COMPA'], 'CHARGES', 'MENAGE'),
        _debit(['COTISATION TRIM'], 'CHARGES', 'BANQUE'),
        _debit(['IRREGULARITES', 'MINIMUM FORFAITAIRE TRIMESTRIEL', 'INTERETS DEBITEURS'], 'CHARGES', 'PENALITES'),
        _debit(['RATP', 'SNCF', 'STATIONNEMENT', 'VELOBO'], 'CHARGES', 'TRANSPORT'),
        _debit(['PRELEVEMENT DE EDF'], 'CHARGES', 'ELECTRICITE'),
        _debit(['SEFO-SOCIETE'], 'CHARGES', 'EAU'),
        _debit(['PRELEVEMENT DE DIRECTION GENERALE'], 'CHARGES', 'IMPOTS'),
        _debit(['CORIOLIS', 'BOUYGUES'], 'CHARGES', 'TELEPHONE'),
        _debit(['CMIDY'], 'CHARGES', 'CANTINE'),
        _debit(['PRELEVEMENT DE FACTURATION MULTIACT'], 'CHARGES', 'GARDERIE'),
        _debit(['PENSION MELH'], 'CHARGES', 'MELH'),
        _debit([
            'CARREFOUR', 'TOTAL MKT FR', 'MONOP', 'FRANPRIX', 'SEAZON', 'MAGASIN U', 'MAISON PONCET',
            'FOURNIL GARE', 'GOUT MORNIN', 'HUIT A HUIT', 'LECLERC', 'LES 3 EPIS', 'LE FOURNIL', 'AU FOURNIL',
            'CENTRE E.LECLE', 'ACHAT CB UTILE', 'LE PETIT CASIN',
        ], 'CHARGES', 'NOURRITURE'),

        _debit(['PHARMACIE', 'PHARMA CONFLAN', 'NOUVELLE PHARM'], 'SANTE', 'PHARMACIE'),
        _debit([
            'DR BOUBOUR', 'SELARL CABINET', 'TELECONSULTATI', 'DOCTEUR SZWARC', 'PEREIRA DUARTE', 'DR LUMBROSO',
            'CB HOMEREZ',
        ], 'SANTE', 'MEDECIN'),
        _debit(['NGUYEN JEREMIE'], 'SANTE', 'PSEUDO-MEDECIN'),

        _debit(['NETFLIX', 'SPOTIFY'], 'LOISIRS', 'NUMERIQUE'),
        _debit([
            "L'ESCALE", 'BURGER KING', 'AU FOUR GAULOI', 'AUX DELICES DE', 'SUSHI MAKI78', 'LE BIJOU BAR',
            'UBER *EATS', 'SUMUP *LE BIS', 'L AMNESIA', 'PRADAL ET BELG', 'T BAO', 'LE JET 7 SC', 'LE GALWAY',
            'LA TAVERNE', 'LA PETITE ITAL',
        ], 'LOISIRS', 'RESTAU'),
        _debit([
            'ASVOLT', 'MERCURE', 'BOOKING.COM', 'PISC GDS BAINS', "CABA-CENTR'AQU", 'SUMUP *ALAVOS',
            'BAX - GOMBERT', 'SARL MOUMINOUX', 'TOURISTES ASSO',
        ], 'LOISIRS', 'VACANCES'),
        _debit([
            'NATURE ET DECO', 'NATURE DECOUVE', 'LE GRAND CERCL', 'TEMPUS FUGIT', 'DECITRE', 'CHOCO-STORY',
        ], 'LOISIRS', 'DIVERS'),
        _debit([
            'CAFE DE LA GAR', 'LE MILWAUKEE', 'LES ESTERLINS', 'SNC CONFLANS', 'AU SAINT HONOR', 'MATHOLINI',
            'PMU 001046736',
        ], 'LOISIRS', 'TABAC'),
        _debit(['CLUB PHILATELI', 'TENNIS PADEL', 'MJC LES TERRAS'], 'LOISIRS', 'ACTIVITES'),

        _debit(['LW-ALVEUS'], 'EDUCATION', 'ANGLAIS'),

        _debit(['FEBSTA'], 'FEBSTA', '??'),
        _debit(['CHEQUE'], 'CHEQUE', '??'),
        _debit(['RETRAIT DAB'], 'RETRAIT DAB', '??'),
    ),
)


def _category(value) -> tuple[str, str] | None:
    if value is None:
        return None
    category1, category2 = value
    return str(category1), str(category2)


def rules_from_dict(data: dict) -> CategoryRules:
    rules = []
    for i, item in enumerate(data.get('rules', [])):
        try:
            rules.append(CategoryRule(
                is_credit=bool(item['credit']),
                keywords=tuple(item['keywords']),
                category1=item['category1'],
                category2=item['category2'],
                label1_prefix=item.get('label1_prefix'),
            ))
        except KeyError as e:
            raise ValueError(f'Rule #{i} is missing {e}') from e

    return CategoryRules(
        rules=tuple(rules),
        credit_default=_category(data.get('credit_default', DEFAULT_RULES.credit_default)),
        debit_default=_category(data.get('debit_default', DEFAULT_RULES.debit_default)),
    )


def load_rules(path: str | Path) -> CategoryRules:
    with open(path, encoding='utf-8') as f:
        return rules_from_dict(json.load(f))
