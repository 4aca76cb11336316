"""Locale tags and the fallback chains used to look up holiday names.

A locale tag has the shape ``language[_REGION[_VARIANT]]`` (for example
``de``, ``de_AT`` or ``ca_ES_VALENCIA``).  Looking up a name walks from
the most specific form of a tag to the bare language.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from feriae.exceptions import UnknownLocale

DEFAULT_LOCALE = "en_US"

#: Sentinel placed in a probe order meaning "use the holiday key as its name".
LOCALE_KEY = "_key"

SEPARATOR = "_"

# ---------------------------------------------------------------------------
# Supported locales
# ---------------------------------------------------------------------------

LOCALES: frozenset[str] = frozenset(
    """
    af af_NA af_ZA ak ak_GH am am_ET ar ar_AE ar_BH ar_DZ ar_EG ar_IQ ar_JO
    ar_KW ar_LB ar_LY ar_MA ar_OM ar_QA ar_SA ar_SD ar_SY ar_TN ar_YE as as_IN
    az az_AZ be be_BY bg bg_BG bm bm_ML bn bn_BD bn_IN bo bo_CN br br_FR bs
    bs_BA ca ca_AD ca_ES ca_ES_VALENCIA ca_FR ca_IT cs cs_CZ cy cy_GB da da_DK
    da_GL de de_AT de_BE de_CH de_DE de_LI de_LU dz dz_BT ee ee_GH el el_CY
    el_GR en en_AU en_BE en_BW en_BZ en_CA en_GB en_GH en_HK en_IE en_IN en_JM
    en_MT en_NA en_NG en_NZ en_PH en_PK en_SG en_TT en_UM en_US en_VI en_ZA
    en_ZW eo es es_AR es_BO es_CL es_CO es_CR es_DO es_EC es_ES es_GT es_HN
    es_MX es_NI es_PA es_PE es_PR es_PY es_SV es_US es_UY es_VE et et_EE eu
    eu_ES fa fa_AF fa_IR ff ff_SN fi fi_FI fo fo_FO fr fr_BE fr_CA fr_CH fr_FR
    fr_LU fr_MC fy fy_NL ga ga_IE gd gd_GB gl gl_ES gu gu_IN ha ha_NG he he_IL
    hi hi_IN hr hr_BA hr_HR hu hu_HU hy hy_AM id id_ID ig ig_NG is is_IS it
    it_CH it_IT ja ja_JP ka ka_GE ki ki_KE kk kk_KZ kl kl_GL km km_KH kn kn_IN
    ko ko_KP ko_KR ks ks_IN kw kw_GB ky ky_KG lb lb_LU lg lg_UG ln ln_CD lo
    lo_LA lt lt_LT lu lu_CD lv lv_LV mg mg_MG mk mk_MK ml ml_IN mn mn_MN mr
    mr_IN ms ms_BN ms_MY mt mt_MT my my_MM nb nb_NO nd nd_ZW ne ne_IN ne_NP nl
    nl_AW nl_BE nl_CW nl_NL nl_SR nn nn_NO om om_ET or or_IN os os_RU pa pa_IN
    pa_PK pl pl_PL ps ps_AF pt pt_AO pt_BR pt_CV pt_MZ pt_PT qu qu_PE rm rm_CH
    rn rn_BI ro ro_MD ro_RO ru ru_BY ru_KZ ru_RU ru_UA rw rw_RW se se_FI se_NO
    sg sg_CF si si_LK sk sk_SK sl sl_SI sn sn_ZW so so_SO sq sq_AL sq_MK sr
    sr_BA sr_ME sr_RS sv sv_AX sv_FI sv_SE sw sw_KE sw_TZ ta ta_IN ta_LK ta_SG
    te te_IN th th_TH ti ti_ER ti_ET to to_TO tr tr_CY tr_TR ug ug_CN uk uk_UA
    ur ur_IN ur_PK uz uz_UZ vi vi_VN yi yo yo_NG zh zh_CN zh_HK zh_SG zh_TW zu
    zu_ZA
    """.split()
)


def is_supported(locale: str) -> bool:
    return locale in LOCALES


def validate_locale(locale: str) -> str:
    """Return *locale* unchanged, or raise ``UnknownLocale``."""
    if not isinstance(locale, str) or not is_supported(locale):
        raise UnknownLocale(str(locale))
    return locale


# ---------------------------------------------------------------------------
# Tags and fallback chains
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LocaleTag:
    """A parsed ``language[_REGION[_VARIANT]]`` identifier."""

    language: str
    region: str | None = None
    variant: str | None = None

    @classmethod
    def parse(cls, tag: str) -> LocaleTag:
        """Split *tag* into at most three parts.

        Anything after the second separator belongs to the variant, so
        ``ca_ES_VALENCIA`` and ``de_DE_berlin`` both parse.
        """
        parts = tag.split(SEPARATOR, 2)
        return cls(*parts)

    def parts(self) -> list[str]:
        return [p for p in (self.language, self.region, self.variant) if p]

    def fallback_chain(self) -> list[str]:
        """Return the tag followed by each less specific form of it.

        ``ca_ES_VALENCIA`` gives ``['ca_ES_VALENCIA', 'ca_ES', 'ca']``.
        """
        parts = self.parts()
        return [SEPARATOR.join(parts[:n]) for n in range(len(parts), 0, -1)]

    def __str__(self) -> str:
        return SEPARATOR.join(self.parts())


def fallback_chain(tag: str) -> list[str]:
    return LocaleTag.parse(tag).fallback_chain()


def _unique(tags: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for tag in tags:
        if tag not in seen:
            seen.add(tag)
            result.append(tag)
    return result


def probe_order(locale: str, locales: Iterable[str] | None = None) -> list[str]:
    """Return the ordered locale tags to try when resolving a name.

    Without explicit *locales*: the chain of *locale*, then the chain of
    ``en_US``, then ``LOCALE_KEY``.  With explicit *locales*: each entry
    expanded in place to its own chain, and ``LOCALE_KEY`` only where the
    caller put it.
    """
    if locales is None:
        return _unique(
            [*fallback_chain(locale), *fallback_chain(DEFAULT_LOCALE), LOCALE_KEY]
        )

    expanded: list[str] = []
    for tag in locales:
        if tag == LOCALE_KEY:
            expanded.append(tag)
        else:
            expanded.extend(fallback_chain(tag))
    return _unique(expanded)
