"""ISO 639-1 language catalog data."""

from __future__ import annotations

# (code, English name, native name, direction)
LANGUAGE_ROWS: tuple[tuple[str, str, str, str], ...] = (
    ("aa", "Afar", "Afaraf", "LTR"),
    ("ab", "Abkhazian", "Аҧсуа бызшәа", "LTR"),
    ("ae", "Avestan", "Avesta", "LTR"),
    ("af", "Afrikaans", "Afrikaans", "LTR"),
    ("ak", "Akan", "Akan", "LTR"),
    ("am", "Amharic", "አማርኛ", "LTR"),
    ("an", "Aragonese", "Aragonés", "LTR"),
    ("ar", "Arabic", "اَلْعَرَبِيَّةُ", "RTL"),
    ("as", "Assamese", "অসমীয়া", "LTR"),
    ("av", "Avaric", "Авар мацӀ", "LTR"),
    ("ay", "Aymara", "Aymar aru", "LTR"),
    ("az", "Azerbaijani", "Azərbaycan dili", "LTR"),
    ("ba", "Bashkir", "Башҡорт теле", "LTR"),
    ("be", "Belarusian", "Беларуская мова", "LTR"),
    ("bg", "Bulgarian", "Български език", "LTR"),
    ("bh", "Bihari languages", "भोजपुरी", "LTR"),
    ("bi", "Bislama", "Bislama", "LTR"),
    ("bm", "Bambara", "Bamanankan", "LTR"),
    ("bn", "Bengali", "বাংলা", "LTR"),
    ("bo", "Tibetan", "བོད་ཡིག", "LTR"),
    ("br", "Breton", "Brezhoneg", "LTR"),
    ("bs", "Bosnian", "Bosanski", "LTR"),
    ("ca", "Catalan", "Català", "LTR"),
    ("ce", "Chechen", "Нохчийн мотт", "LTR"),
    ("ch", "Chamorro", "Chamoru", "LTR"),
    ("co", "Corsican", "Corsu", "LTR"),
    ("cr", "Cree", "ᓀᐦᐃᔭᐍᐏᐣ", "LTR"),
    ("cs", "Czech", "Čeština", "LTR"),
    ("cu", "Church Slavic", "Ѩзыкъ словѣньскъ", "LTR"),
    ("cv", "Chuvash", "Чӑваш чӗлхи", "LTR"),
    ("cy", "Welsh", "Cymraeg", "LTR"),
    ("da", "Danish", "Dansk", "LTR"),
    ("de", "German", "Deutsch", "LTR"),
    ("dv", "Divehi", "ދިވެހި", "RTL"),
    ("dz", "Dzongkha", "རྫོང་ཁ", "LTR"),
    ("ee", "Ewe", "Eʋegbe", "LTR"),
    ("el", "Greek", "Ελληνικά", "LTR"),
    ("en", "English", "English", "LTR"),
    ("eo", "Esperanto", "Esperanto", "LTR"),
    ("es", "Spanish", "Español", "LTR"),
    ("et", "Estonian", "Eesti", "LTR"),
    ("eu", "Basque", "Euskara", "LTR"),
    ("fa", "Persian", "فارسی", "RTL"),
    ("ff", "Fulah", "Fulfulde", "LTR"),
    ("fi", "Finnish", "Suomi", "LTR"),
    ("fj", "Fijian", "Vakaviti", "LTR"),
    ("fo", "Faroese", "Føroyskt", "LTR"),
    ("fr", "French", "Français", "LTR"),
    ("fy", "Western Frisian", "Frysk", "LTR"),
    ("ga", "Irish", "Gaeilge", "LTR"),
    ("gd", "Scottish Gaelic", "Gàidhlig", "LTR"),
    ("gl", "Galician", "Galego", "LTR"),
    ("gn", "Guaraní", "Avañe'ẽ", "LTR"),
    ("gu", "Gujarati", "ગુજરાતી", "LTR"),
    ("gv", "Manx", "Gaelg", "LTR"),
    ("ha", "Hausa", "هَوُسَ", "RTL"),
    ("he", "Hebrew", "עברית", "RTL"),
    ("hi", "Hindi", "हिन्दी", "LTR"),
    ("ho", "Hiri Motu", "Hiri Motu", "LTR"),
    ("hr", "Croatian", "Hrvatski", "LTR"),
    ("ht", "Haitian Creole", "Kreyòl ayisyen", "LTR"),
    ("hu", "Hungarian", "Magyar", "LTR"),
    ("hy", "Armenian", "Հայերեն", "LTR"),
    ("hz", "Herero", "Otjiherero", "LTR"),
    ("ia", "Interlingua", "Interlingua", "LTR"),
    ("id", "Indonesian", "Bahasa Indonesia", "LTR"),
    ("ie", "Interlingue", "Interlingue", "LTR"),
    ("ig", "Igbo", "Asụsụ Igbo", "LTR"),
    ("ii", "Sichuan Yi", "ꆈꌠ꒿ Nuosuhxop", "LTR"),
    ("ik", "Inupiaq", "Iñupiaq", "LTR"),
    ("io", "Ido", "Ido", "LTR"),
    ("is", "Icelandic", "Íslenska", "LTR"),
    ("it", "Italian", "Italiano", "LTR"),
    ("iu", "Inuktitut", "ᐃᓄᒃᑎᑐᑦ", "LTR"),
    ("ja", "Japanese", "日本語", "LTR"),
    ("jv", "Javanese", "Basa Jawa", "LTR"),
    ("ka", "Georgian", "Ქართული", "LTR"),
    ("kg", "Kongo", "Kikongo", "LTR"),
    ("ki", "Kikuyu", "Gĩkũyũ", "LTR"),
    ("kj", "Kuanyama", "Kuanyama", "LTR"),
    ("kk", "Kazakh", "Қазақ тілі", "LTR"),
    ("kl", "Kalaallisut", "Kalaallisut", "LTR"),
    ("km", "Central Khmer", "ខេមរភាសា", "LTR"),
    ("kn", "Kannada", "ಕನ್ನಡ", "LTR"),
    ("ko", "Korean", "한국어", "LTR"),
    ("kr", "Kanuri", "Kanuri", "LTR"),
    ("ks", "Kashmiri", "कश्मीरी", "RTL"),
    ("ku", "Kurdish", "Kurdî", "RTL"),
    ("kv", "Komi", "Коми кыв", "LTR"),
    ("kw", "Cornish", "Kernewek", "LTR"),
    ("ky", "Kirghiz", "Кыргызча", "LTR"),
    ("la", "Latin", "Latine", "LTR"),
    ("lb", "Luxembourgish", "Lëtzebuergesch", "LTR"),
    ("lg", "Ganda", "Luganda", "LTR"),
    ("li", "Limburgish", "Limburgs", "LTR"),
    ("ln", "Lingala", "Lingála", "LTR"),
    ("lo", "Lao", "ພາສາລາວ", "LTR"),
    ("lt", "Lithuanian", "Lietuvių kalba", "LTR"),
    ("lu", "Luba-Katanga", "Kiluba", "LTR"),
    ("lv", "Latvian", "Latviešu valoda", "LTR"),
    ("mg", "Malagasy", "Fiteny malagasy", "LTR"),
    ("mh", "Marshallese", "Kajin M̧ajeļ", "LTR"),
    ("mi", "Maori", "Te reo Māori", "LTR"),
    ("mk", "Macedonian", "Македонски", "LTR"),
    ("ml", "Malayalam", "മലയാളം", "LTR"),
    ("mn", "Mongolian", "Монгол хэл", "LTR"),
    ("mr", "Marathi", "मराठी", "LTR"),
    ("ms", "Malay", "Bahasa Melayu", "LTR"),
    ("mt", "Maltese", "Malti", "LTR"),
    ("my", "Burmese", "ဗမာစာ", "LTR"),
    ("na", "Nauru", "Dorerin Naoero", "LTR"),
    ("nb", "Norwegian Bokmål", "Norsk bokmål", "LTR"),
    ("nd", "North Ndebele", "IsiNdebele", "LTR"),
    ("ne", "Nepali", "नेपाली", "LTR"),
    ("ng", "Ndonga", "Owambo", "LTR"),
    ("nl", "Dutch", "Nederlands", "LTR"),
    ("nn", "Norwegian Nynorsk", "Norsk nynorsk", "LTR"),
    ("no", "Norwegian", "Norsk", "LTR"),
    ("nr", "South Ndebele", "IsiNdebele", "LTR"),
    ("nv", "Navajo", "Diné bizaad", "LTR"),
    ("ny", "Chichewa", "ChiCheŵa", "LTR"),
    ("oc", "Occitan", "Occitan", "LTR"),
    ("oj", "Ojibwe", "ᐊᓂᔑᓈᐯᒧᐎᓐ", "LTR"),
    ("om", "Oromo", "Afaan Oromoo", "LTR"),
    ("or", "Oriya", "ଓଡ଼ିଆ", "LTR"),
    ("os", "Ossetian", "Ирон æвзаг", "LTR"),
    ("pa", "Panjabi", "ਪੰਜਾਬੀ", "LTR"),
    ("pi", "Pali", "पाऴि", "LTR"),
    ("pl", "Polish", "Polski", "LTR"),
    ("ps", "Pushto", "پښتو", "RTL"),
    ("pt", "Portuguese", "Português", "LTR"),
    ("qu", "Quechua", "Runa Simi", "LTR"),
    ("rm", "Romansh", "Rumantsch grischun", "LTR"),
    ("rn", "Rundi", "Ikirundi", "LTR"),
    ("ro", "Romanian", "Română", "LTR"),
    ("ru", "Russian", "Русский", "LTR"),
    ("rw", "Kinyarwanda", "Ikinyarwanda", "LTR"),
    ("sa", "Sanskrit", "संस्कृतम्", "LTR"),
    ("sc", "Sardinian", "Sardu", "LTR"),
    ("sd", "Sindhi", "सिन्धी", "RTL"),
    ("se", "Northern Sami", "Davvisámegiella", "LTR"),
    ("sg", "Sango", "Yângâ tî sängö", "LTR"),
    ("si", "Sinhalese", "සිංහල", "LTR"),
    ("sk", "Slovak", "Slovenčina", "LTR"),
    ("sl", "Slovenian", "Slovenščina", "LTR"),
    ("sm", "Samoan", "Gagana fa'a Sāmoa", "LTR"),
    ("sn", "Shona", "ChiShona", "LTR"),
    ("so", "Somali", "Soomaaliga", "LTR"),
    ("sq", "Albanian", "Shqip", "LTR"),
    ("sr", "Serbian", "Српски", "LTR"),
    ("ss", "Swati", "SiSwati", "LTR"),
    ("st", "Sotho, Southern", "Sesotho", "LTR"),
    ("su", "Sundanese", "Basa Sunda", "LTR"),
    ("sv", "Swedish", "Svenska", "LTR"),
    ("sw", "Swahili", "Kiswahili", "LTR"),
    ("ta", "Tamil", "தமிழ்", "LTR"),
    ("te", "Telugu", "తెలుగు", "LTR"),
    ("tg", "Tajik", "Тоҷикӣ", "LTR"),
    ("th", "Thai", "ไทย", "LTR"),
    ("ti", "Tigrinya", "ትግርኛ", "LTR"),
    ("tk", "Turkmen", "Türkmençe", "LTR"),
    ("tl", "Tagalog", "Wikang Tagalog", "LTR"),
    ("tn", "Tswana", "Setswana", "LTR"),
    ("to", "Tonga", "Faka Tonga", "LTR"),
    ("tr", "Turkish", "Türkçe", "LTR"),
    ("ts", "Tsonga", "Xitsonga", "LTR"),
    ("tt", "Tatar", "Татар теле", "LTR"),
    ("tw", "Twi", "Twi", "LTR"),
    ("ty", "Tahitian", "Reo Tahiti", "LTR"),
    ("ug", "Uighur", "Уйғур тили", "LTR"),
    ("uk", "Ukrainian", "Українська", "LTR"),
    ("ur", "Urdu", "اردو", "RTL"),
    ("uz", "Uzbek", "Ўзбек", "LTR"),
    ("ve", "Venda", "Tshivenḓa", "LTR"),
    ("vi", "Vietnamese", "Tiếng Việt", "LTR"),
    ("vo", "Volapük", "Volapük", "LTR"),
    ("wa", "Walloon", "Walon", "LTR"),
    ("wo", "Wolof", "Wollof", "LTR"),
    ("xh", "Xhosa", "IsiXhosa", "LTR"),
    ("yi", "Yiddish", "ייִדיש", "RTL"),
    ("yo", "Yoruba", "Yorùbá", "LTR"),
    ("za", "Zhuang", "Saɯ cueŋƅ", "LTR"),
    ("zh", "Chinese", "中文", "LTR"),
    ("zu", "Zulu", "IsiZulu", "LTR"),
)
