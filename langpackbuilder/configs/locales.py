# -*- coding: utf-8 -*-
# langpack-builder - Language modules for live system images
# Copyright (C) 2025 langpack-builder authors
#
# This file is part of langpack-builder.
#
# langpack-builder is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# langpack-builder is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with langpack-builder.  If not, see <https://www.gnu.org/licenses/>.

"""Identifiers that locate the resources of a locale in the different subsystems.

Columns: locale code, xkb layout, xkb layout description, browser language
package on debian (firefox-esr-l10n-*), browser language package on ubuntu
(firefox-locale-*), office locale, office message catalog.
"""

LOCALES = [
    ("ar_EG", "ara", "Arabic", "ar", "ar", "ar-EG", "ar"),
    ("be_BY", "by", "Belarusian", "be", "be", "be-BY", "be"),
    ("bg_BG", "bg", "Bulgarian", "bg", "bg", "bg-BG", "bg"),
    ("ca_ES", "es", "Catalan", "ca", "ca", "ca-ES", "ca"),
    ("cs_CZ", "cz", "Czech", "cs", "cs", "cs-CZ", "cs"),
    ("da_DK", "dk", "Danish", "da", "da", "da-DK", "da"),
    ("de_DE", "de", "German", "de", "de", "de-DE", "de"),
    ("el_GR", "gr", "Greek", "el", "el", "el-GR", "el"),
    ("en_GB", "gb", "English (UK)", "en-gb", "en", "en-GB", "en-GB"),
    ("en_US", "us", "English (US)", "en-us", "en", "en-US", "en-US"),
    ("es_ES", "es", "Spanish", "es-es", "es", "es-ES", "es"),
    ("es_MX", "latam", "Spanish (Latin American)", "es-mx", "es", "es-MX", "es"),
    ("et_EE", "ee", "Estonian", "et", "et", "et-EE", "et"),
    ("eu_ES", "es", "Basque", "eu", "eu", "eu-ES", "eu"),
    ("fa_IR", "ir", "Persian", "fa", "fa", "fa-IR", "fa"),
    ("fi_FI", "fi", "Finnish", "fi", "fi", "fi-FI", "fi"),
    ("fr_FR", "fr", "French", "fr", "fr", "fr-FR", "fr"),
    ("ga_IE", "ie", "Irish", "ga-ie", "ga", "ga-IE", "ga"),
    ("gl_ES", "es", "Galician", "gl", "gl", "gl-ES", "gl"),
    ("he_IL", "il", "Hebrew", "he", "he", "he-IL", "he"),
    ("hi_IN", "in", "Indian", "hi-in", "hi", "hi-IN", "hi"),
    ("hr_HR", "hr", "Croatian", "hr", "hr", "hr-HR", "hr"),
    ("hu_HU", "hu", "Hungarian", "hu", "hu", "hu-HU", "hu"),
    ("is_IS", "is", "Icelandic", "is", "is", "is-IS", "is"),
    ("it_IT", "it", "Italian", "it", "it", "it-IT", "it"),
    ("ja_JP", "jp", "Japanese", "ja", "ja", "ja-JP", "ja"),
    ("kk_KZ", "kz", "Kazakh", "kk", "kk", "kk-KZ", "kk"),
    ("ko_KR", "kr", "Korean", "ko", "ko", "ko-KR", "ko"),
    ("lt_LT", "lt", "Lithuanian", "lt", "lt", "lt-LT", "lt"),
    ("lv_LV", "lv", "Latvian", "lv", "lv", "lv-LV", "lv"),
    ("nb_NO", "no", "Norwegian", "nb-no", "nb", "nb-NO", "nb"),
    ("nl_NL", "nl", "Dutch", "nl", "nl", "nl-NL", "nl"),
    ("pl_PL", "pl", "Polish", "pl", "pl", "pl-PL", "pl"),
    ("pt_BR", "br", "Portuguese (Brazil)", "pt-br", "pt", "pt-BR", "pt-BR"),
    ("pt_PT", "pt", "Portuguese", "pt-pt", "pt", "pt-PT", "pt"),
    ("ro_RO", "ro", "Romanian", "ro", "ro", "ro-RO", "ro"),
    ("ru_RU", "ru", "Russian", "ru", "ru", "ru-RU", "ru"),
    ("sk_SK", "sk", "Slovak", "sk", "sk", "sk-SK", "sk"),
    ("sl_SI", "si", "Slovenian", "sl", "sl", "sl-SI", "sl"),
    ("sr_RS", "rs", "Serbian", "sr", "sr", "sr-RS", "sr"),
    ("sv_SE", "se", "Swedish", "sv-se", "sv", "sv-SE", "sv"),
    ("th_TH", "th", "Thai", "th", "th", "th-TH", "th"),
    ("tr_TR", "tr", "Turkish", "tr", "tr", "tr-TR", "tr"),
    ("uk_UA", "ua", "Ukrainian", "uk", "uk", "uk-UA", "uk"),
    ("vi_VN", "vn", "Vietnamese", "vi", "vi", "vi-VN", "vi"),
    ("zh_CN", "cn", "Chinese", "zh-cn", "zh-hans", "zh-CN", "zh-CN"),
    ("zh_TW", "tw", "Taiwanese", "zh-tw", "zh-hant", "zh-TW", "zh-TW"),
]
