"""
orthocal.properties.titles
--------------------------
Human-readable (Russian) titles of property tags.
"""

from __future__ import annotations

from typing import Dict

from . import tags as T

TITLES: Dict[int, str] = {
    # movable days
    T.pasha: "Светлое Христово Воскресение. ПАСХА.",
    T.svetlaya1: "Понедельник Светлой седмицы.",
    T.svetlaya2: "Вторник Светлой седмицы.",
    T.svetlaya3: "Среда Светлой седмицы.",
    T.svetlaya4: "Четверг Светлой седмицы.",
    T.svetlaya5: "Пятница Светлой седмицы.",
    T.svetlaya6: "Суббота Светлой седмицы.",
    T.ned2_popashe: "Неделя 2-я по Пасхе, апостола Фомы́. Антипасха.",
    T.s2popashe_1: "Понедельник 2-й седмицы по Пасхе.",
    T.s2popashe_2: "Вторник 2-й седмицы по Пасхе. Ра́доница. Поминовение усопших.",
    T.s2popashe_3: "Среда 2-й седмицы по Пасхе.",
    T.s2popashe_4: "Четверг 2-й седмицы по Пасхе.",
    T.s2popashe_5: "Пятница 2-й седмицы по Пасхе.",
    T.s2popashe_6: "Суббота 2-й седмицы по Пасхе.",
    T.ned3_popashe: "Неделя 3-я по Пасхе, святых жен-мироносиц: Марии Магдалины, Марии Клеоповой, Саломии, Иоанны, Марфы и Марии, Сусанны и иных.",
    T.s3popashe_1: "Понедельник 3-й седмицы по Пасхе.",
    T.s3popashe_2: "Вторник 3-й седмицы по Пасхе.",
    T.s3popashe_3: "Среда 3-й седмицы по Пасхе.",
    T.s3popashe_4: "Четверг 3-й седмицы по Пасхе.",
    T.s3popashe_5: "Пятница 3-й седмицы по Пасхе.",
    T.s3popashe_6: "Суббота 3-й седмицы по Пасхе.",
    T.ned4_popashe: "Неделя 4-я по Пасхе, о расслабленном.",
    T.s4popashe_1: "Понедельник 4-й седмицы по Пасхе.",
    T.s4popashe_2: "Вторник 4-й седмицы по Пасхе.",
    T.s4popashe_3: "Среда 4-й седмицы по Пасхе. Преполове́ние Пятидесятницы.",
    T.s4popashe_4: "Четверг 4-й седмицы по Пасхе.",
    T.s4popashe_5: "Пятница 4-й седмицы по Пасхе.",
    T.s4popashe_6: "Суббота 4-й седмицы по Пасхе.",
    T.ned5_popashe: "Неделя 5-я по Пасхе, о самаряны́не.",
    T.s5popashe_1: "Понедельник 5-й седмицы по Пасхе.",
    T.s5popashe_2: "Вторник 5-й седмицы по Пасхе.",
    T.s5popashe_3: "Среда 5-й седмицы по Пасхе. Отдание праздника Преполовения Пятидесятницы.",
    T.s5popashe_4: "Четверг 5-й седмицы по Пасхе.",
    T.s5popashe_5: "Пятница 5-й седмицы по Пасхе.",
    T.s5popashe_6: "Суббота 5-й седмицы по Пасхе.",
    T.ned6_popashe: "Неделя 6-я по Пасхе, о слепом.",
    T.s6popashe_1: "Понедельник 6-й седмицы по Пасхе.",
    T.s6popashe_2: "Вторник 6-й седмицы по Пасхе.",
    T.s6popashe_3: "Среда 6-й седмицы по Пасхе. Отдание праздника Пасхи. Предпразднство Вознесения.",
    T.s6popashe_4: "Четверг 6-й седмицы по Пасхе. Вознесе́ние Госпо́дне.",
    T.s6popashe_5: "Пятница 6-й седмицы по Пасхе. Попразднство Вознесения.",
    T.s6popashe_6: "Суббота 6-й седмицы по Пасхе. Попразднство Вознесения.",
    T.ned7_popashe: "Неделя 7-я по Пасхе. Попразднство Вознесения. Святых отцов Первого Вселенского Собора.",
    T.s7popashe_1: "Понедельник 7-й седмицы по Пасхе. Попразднство Вознесения.",
    T.s7popashe_2: "Вторник 7-й седмицы по Пасхе. Попразднство Вознесения.",
    T.s7popashe_3: "Среда 7-й седмицы по Пасхе. Попразднство Вознесения.",
    T.s7popashe_4: "Четверг 7-й седмицы по Пасхе. Попразднство Вознесения.",
    T.s7popashe_5: "Пятница 7-й седмицы по Пасхе. Отдание праздника Вознесения Господня.",
    T.s7popashe_6: "Суббота 7-й седмицы по Пасхе. Троицкая родительская суббота.",
    T.ned8_popashe: "Неделя 8-я по Пасхе. День Святой Тро́ицы. Пятидеся́тница.",
    T.s1po50_1: "Понедельник Пятидесятницы. День Святаго Духа.",
    T.s1po50_2: "Вторник Пятидесятницы.",
    T.s1po50_3: "Среда Пятидесятницы.",
    T.s1po50_4: "Четверг Пятидесятницы.",
    T.s1po50_5: "Пятница Пятидесятницы.",
    T.s1po50_6: "Суббота Пятидесятницы. Отдание праздника Пятидесятницы.",
    T.ned1_po50: "Неделя 1-я по Пятидесятнице, Всех святых.",
    T.ned2_po50: "Неделя 2-я по Пятидесятнице, Всех святых, в земле Русской просиявших.",
    T.ned3_po50: "Неделя 3-я по Пятидесятнице.",
    T.ned4_po50: "Неделя 4-я по Пятидесятнице.",
    T.sub_pered14sent: "Суббота пред Воздвижением.",
    T.ned_pered14sent: "Неделя пред Воздвижением.",
    T.sub_po14sent: "Суббота по Воздвижении.",
    T.ned_po14sent: "Неделя по Воздвижении.",
    T.sobor_otcev7sobora: "Память святых отцов VII Вселенского Собора.",
    T.sub_dmitry: "Димитриевская родительская суббота.",
    T.ned_praotec: "Неделя святых пра́отец.",
    T.sub_peredrojd: "Суббота пред Рождеством Христовым.",
    T.ned_peredrojd: "Неделя пред Рождеством Христовым, святых отец.",
    T.sub_porojdestve: "Суббота по Рождестве Христовом.",
    T.ned_porojdestve: "Неделя по Рождестве Христовом.",
    T.ned_mitar_ifaris: "Неделя о мытаре́ и фарисе́е.",
    T.ned_obludnom: "Неделя о блудном сыне.",
    T.sub_myasopust: "Суббота мясопу́стная. Вселенская родительская суббота.",
    T.ned_myasopust: "Неделя мясопу́стная, о Страшном Суде.",
    T.sirnaya1: "Понедельник сырный.",
    T.sirnaya2: "Вторник сырный.",
    T.sirnaya3: "Среда сырная.",
    T.sirnaya4: "Четверг сырный.",
    T.sirnaya5: "Пятница сырная.",
    T.sirnaya6: "Суббота сырная.",
    T.ned_siropust: "Неделя сыропустная. Воспоминание Адамова изгнания. Прощеное воскресенье.",
    T.vel_post_d1n1: "Понедельник 1-й седмицы. Начало Великого поста.",
    T.vel_post_d2n1: "Вторник 1-й седмицы великого поста.",
    T.vel_post_d3n1: "Среда 1-й седмицы великого поста.",
    T.vel_post_d4n1: "Четверг 1-й седмицы великого поста.",
    T.vel_post_d5n1: "Пятница 1-й седмицы великого поста.",
    T.vel_post_d6n1: "Суббота 1-й седмицы великого поста.",
    T.vel_post_d0n2: "Неделя 1-я Великого поста. Торжество Православия.",
    T.vel_post_d1n2: "Понедельник 2-й седмицы великого поста.",
    T.vel_post_d2n2: "Вторник 2-й седмицы великого поста.",
    T.vel_post_d3n2: "Среда 2-й седмицы великого поста.",
    T.vel_post_d4n2: "Четверг 2-й седмицы великого поста.",
    T.vel_post_d5n2: "Пятница 2-й седмицы великого поста.",
    T.vel_post_d6n2: "Суббота 2-й седмицы великого поста.",
    T.vel_post_d0n3: "Неделя 2-я Великого поста.",
    T.vel_post_d1n3: "Понедельник 3-й седмицы великого поста.",
    T.vel_post_d2n3: "Вторник 3-й седмицы великого поста.",
    T.vel_post_d3n3: "Среда 3-й седмицы великого поста.",
    T.vel_post_d4n3: "Четверг 3-й седмицы великого поста.",
    T.vel_post_d5n3: "Пятница 3-й седмицы великого поста.",
    T.vel_post_d6n3: "Суббота 3-й седмицы великого поста.",
    T.vel_post_d0n4: "Неделя 3-я Великого поста, Крестопоклонная.",
    T.vel_post_d1n4: "Понедельник 4-й седмицы вел. поста, Крестопоклонной.",
    T.vel_post_d2n4: "Вторник 4-й седмицы вел. поста, Крестопоклонной.",
    T.vel_post_d3n4: "Среда 4-й седмицы вел. поста, Крестопоклонной.",
    T.vel_post_d4n4: "Четверг 4-й седмицы вел. поста, Крестопоклонной.",
    T.vel_post_d5n4: "Пятница 4-й седмицы вел. поста, Крестопоклонной.",
    T.vel_post_d6n4: "Суббота 4-й седмицы вел. поста, Крестопоклонной.",
    T.vel_post_d0n5: "Неделя 4-я Великого поста.",
    T.vel_post_d1n5: "Понедельник 5-й седмицы великого поста.",
    T.vel_post_d2n5: "Вторник 5-й седмицы великого поста.",
    T.vel_post_d3n5: "Среда 5-й седмицы великого поста.",
    T.vel_post_d4n5: "Четверг 5-й седмицы великого поста.",
    T.vel_post_d5n5: "Пятница 5-й седмицы великого поста.",
    T.vel_post_d6n5: "Суббота 5-й седмицы великого поста. Суббота Ака́фиста. Похвала́ Пресвятой Богородицы.",
    T.vel_post_d0n6: "Неделя 5-я Великого поста.",
    T.vel_post_d1n6: "Понедельник 6-й седмицы великого поста, ва́ий.",
    T.vel_post_d2n6: "Вторник 6-й седмицы великого поста, ва́ий.",
    T.vel_post_d3n6: "Среда 6-й седмицы великого поста, ва́ий.",
    T.vel_post_d4n6: "Четверг 6-й седмицы великого поста, ва́ий.",
    T.vel_post_d5n6: "Пятница 6-й седмицы великого поста, ва́ий.",
    T.vel_post_d6n6: "Суббота 6-й седмицы великого поста, ва́ий. Лазарева суббота.",
    T.vel_post_d0n7: "Неделя ва́ий (цветоно́сная, Вербное воскресенье). Вход Господень в Иерусалим.",
    T.vel_post_d1n7: "Страстна́я седмица. Великий Понедельник.",
    T.vel_post_d2n7: "Страстна́я седмица. Великий Вторник.",
    T.vel_post_d3n7: "Страстна́я седмица. Великая Среда.",
    T.vel_post_d4n7: "Страстна́я седмица. Великий Четверг. Воспоминание Тайной Ве́чери.",
    T.vel_post_d5n7: "Страстна́я седмица. Великая Пятница.",
    T.vel_post_d6n7: "Страстна́я седмица. Великая Суббота.",
    # fixed days
    T.m1d1: "Обре́зание Господне. Свт. Василия Великого, архиеп. Кесари́и Каппадоки́йской.",
    T.m1d2: "Предпразднство Богоявления.",
    T.m1d3: "Предпразднство Богоявления.",
    T.m1d4: "Предпразднство Богоявления.",
    T.m1d5: "Предпразднство Богоявления. На́вечерие Богоявления (Крещенский сочельник). День постный.",
    T.m1d6: "Святое Богоявле́ние. Крещение Господа Бога и Спаса нашего Иисуса Христа.",
    T.m1d7: "Попразднство Богоявления.",
    T.m1d8: "Попразднство Богоявления.",
    T.m1d9: "Попразднство Богоявления.",
    T.m1d10: "Попразднство Богоявления.",
    T.m1d11: "Попразднство Богоявления.",
    T.m1d12: "Попразднство Богоявления.",
    T.m1d13: "Попразднство Богоявления.",
    T.m1d14: "Отдание праздника Богоявления.",
    T.m3d25: "Благове́щение Пресвято́й Богоро́дицы.",
    T.m6d24: "Рождество́ честно́го сла́вного Проро́ка, Предте́чи и Крести́теля Госпо́дня Иоа́нна.",
    T.m6d25: "Отдание праздника рождества Предте́чи и Крести́теля Госпо́дня Иоа́нна.",
    T.m6d29: "Славных и всехва́льных первоверхо́вных апостолов Петра и Павла.",
    T.m8d5: "Предпразднство Преображения Господня.",
    T.m8d6: "Преображение Господа Бога и Спаса нашего Иисуса Христа.",
    T.m8d7: "Попразднство Преображения Господня.",
    T.m8d8: "Попразднство Преображения Господня.",
    T.m8d9: "Попразднство Преображения Господня.",
    T.m8d10: "Попразднство Преображения Господня.",
    T.m8d11: "Попразднство Преображения Господня.",
    T.m8d12: "Попразднство Преображения Господня.",
    T.m8d13: "Отдание праздника Преображения Господня.",
    T.m8d14: "Предпразднство Успения Пресвятой Богородицы.",
    T.m8d15: "Успе́ние Пресвятой Владычицы нашей Богородицы и Приснодевы Марии.",
    T.m8d16: "Попразднство Успения Пресвятой Богородицы.",
    T.m8d17: "Попразднство Успения Пресвятой Богородицы.",
    T.m8d18: "Попразднство Успения Пресвятой Богородицы.",
    T.m8d19: "Попразднство Успения Пресвятой Богородицы.",
    T.m8d20: "Попразднство Успения Пресвятой Богородицы.",
    T.m8d21: "Попразднство Успения Пресвятой Богородицы.",
    T.m8d22: "Попразднство Успения Пресвятой Богородицы.",
    T.m8d23: "Отдание праздника Успения Пресвятой Богородицы.",
    T.m9d7: "Предпразднство Рождества Пресвятой Богородицы.",
    T.m9d8: "Рождество Пресвятой Владычицы нашей Богородицы и Приснодевы Марии.",
    T.m9d9: "Попразднство Рождества Пресвятой Богородицы.",
    T.m9d10: "Попразднство Рождества Пресвятой Богородицы.",
    T.m9d11: "Попразднство Рождества Пресвятой Богородицы.",
    T.m9d12: "Отдание праздника Рождества Пресвятой Богородицы.",
    T.m9d13: "Предпразднство Воздви́жения Честно́го и Животворя́щего Креста Господня.",
    T.m9d14: "Всеми́рное Воздви́жение Честно́го и Животворя́щего Креста́ Госпо́дня. День постный.",
    T.m9d15: "Попразднство Воздвижения Креста.",
    T.m9d16: "Попразднство Воздвижения Креста.",
    T.m9d17: "Попразднство Воздвижения Креста.",
    T.m9d18: "Попразднство Воздвижения Креста.",
    T.m9d19: "Попразднство Воздвижения Креста.",
    T.m9d20: "Попразднство Воздвижения Креста.",
    T.m9d21: "Отдание праздника Воздвижения Животворящего Креста Господня.",
    T.m8d29: "Усекновение главы́ Пророка, Предтечи и Крестителя Господня Иоанна. День постный.",
    T.m10d1: "Покро́в Пресвятой Владычицы нашей Богородицы и Приснодевы Марии.",
    T.m11d20: "Предпразднство Введения (Входа) во храм Пресвятой Богородицы.",
    T.m11d21: "Введе́ние (Вход) во храм Пресвятой Владычицы нашей Богородицы и Приснодевы Марии.",
    T.m11d22: "Попразднство Введения.",
    T.m11d23: "Попразднство Введения.",
    T.m11d24: "Попразднство Введения.",
    T.m11d25: "Отдание праздника Введения (Входа) во храм Пресвятой Богородицы.",
    T.m12d20: "Предпразднство Рождества Христова.",
    T.m12d21: "Предпразднство Рождества Христова.",
    T.m12d22: "Предпразднство Рождества Христова.",
    T.m12d23: "Предпразднство Рождества Христова.",
    T.m12d24: "Предпразднство Рождества Христова. На́вечерие Рождества Христова (Рождественский сочельник).",
    T.m12d25: "Рождество Господа Бога и Спаса нашего Иисуса Христа.",
    T.m12d26: "Попразднство Рождества Христова.",
    T.m12d27: "Попразднство Рождества Христова.",
    T.m12d28: "Попразднство Рождества Христова.",
    T.m12d29: "Попразднство Рождества Христова.",
    T.m12d30: "Попразднство Рождества Христова.",
    T.m12d31: "Отдание праздника Рождества Христова.",
    # other computed days
    T.sub_peredbogoyav: "Суббота перед Богоявлением.",
    T.ned_peredbogoyav: "Неделя перед Богоявлением.",
    T.sub_pobogoyav: "Суббота по Богоявлении.",
    T.ned_pobogoyav: "Неделя по Богоявлении.",
    T.sobor_novom_rus: "Собор новомучеников и исповедников Церкви Русской.",
    T.sobor_3sv: "Собор вселенских учителей и святителей Василия Великого, Григория Богослова и Иоанна Златоустого.",
    T.sretenie_predpr: "Предпразднство Сре́тения Господня.",
    T.sretenie: "Сре́тение Господа Бога и Спаса нашего Иисуса Христа.",
    T.sretenie_poprazd1: "День 1-й Попразднства Сретения Господня.",
    T.sretenie_poprazd2: "День 2-й Попразднства Сретения Господня.",
    T.sretenie_poprazd3: "День 3-й Попразднства Сретения Господня.",
    T.sretenie_poprazd4: "День 4-й Попразднства Сретения Господня.",
    T.sretenie_poprazd5: "День 5-й Попразднства Сретения Господня.",
    T.sretenie_poprazd6: "День 6-й Попразднства Сретения Господня.",
    T.sretenie_otdanie: "Отдание праздника Сретения Господня.",
    T.obret_gl_ioanna12: "Первое и второе Обре́тение главы Иоанна Предтечи.",
    T.muchenik_40: "Святых сорока́ мучеников, в Севастийском е́зере мучившихся.",
    T.blag_predprazd: "Предпразднство Благовещения Пресвятой Богородицы.",
    T.blag_otdanie: "Отдание праздника Благовещения Пресвятой Богородицы.",
    T.georgia_pob: "Вмч. Гео́ргия Победоно́сца. Мц. царицы Александры.",
    T.obret_gl_ioanna3: "Третье обре́тение главы Предтечи и Крестителя Господня Иоанна.",
    T.sobor_otcev_1_6sob: "Память святых отцов шести Вселенских Соборов.",
    T.feodor_tir: "Вмч. Феодора Тирона (ок. 306) (переходящее празднование).",
    T.grigor_palam: "Свт. Григория Паламы, архиеп. Фессалонитского (переходящее празднование).",
    T.ioann_lestv: "Прп. Иоанна Лествичника (переходящее празднование).",
    T.mari_egipt: "Прп. Марии Египетской (переходящее празднование).",
    T.sub_porojdestve_r: "Чтения субботы по Рождестве Христовом.",
    T.ned_porojdestve_r: "Чтения недели по Рождестве Христовом.",
    T.sub_peredbogoyav_r: "Чтения субботы пред Богоявлением.",
    T.ned_peredbogoyav_r: "Чтения недели пред Богоявлением.",
    T.ned_prav_bogootec: "Правв. Иосифа Обручника, Давида царя и Иакова, брата Господня.",
    T.sobor_vsehsv_rus: "Всех святых, в земле Русской просиявших.",
    # feast classes
    T.dvana10_per_prazd: "Двунадесятые переходящие праздники",
    T.dvana10_nep_prazd: "Двунадесятые непереходящие праздники",
    T.vel_prazd: "Великие праздники",
    # fasts and continuous weeks
    T.post_vel: "Великий пост",
    T.post_petr: "Петров пост",
    T.post_usp: "Успенский пост",
    T.post_rojd: "Рождественский пост",
    T.full7_svyatki: "Сплошная седмица. Святки",
    T.full7_mitar: "Сплошная седмица. Мытаря и фарисея",
    T.full7_sirn: "Сплошная седмица. Сырная (Масленица)",
    T.full7_pasha: "Сплошная седмица. Светлая",
    T.full7_troica: "Сплошная седмица. Троицкая",
    # Theotokos icons
    T.mari_icon_01: "иконы Божией Матери «Акафистная Дионисиатская (Мироточивая)»",
    T.mari_icon_02: "иконы Божией Матери «Аз есмь с вами, и никтоже на вы (Леуши́нская)»",
    T.mari_icon_03: "иконы Божией Матери «Девпетуровская-Тамбовская»",
    T.mari_icon_04: "иконы Божией Матери «Дубенская (Красногорская)»",
    T.mari_icon_05: "иконы Божией Матери «Дектоурская (Доктоурская)»",
    T.mari_icon_06: "иконы Божией Матери «Живоносный Источник»",
    T.mari_icon_07: "иконы Божией Матери «Межеричская (Жизнеподательница)»",
    T.mari_icon_08: "иконы Божией Матери «Зна́мение Курская-Коренная»",
    T.mari_icon_09: "иконы Божией Матери «Иверская»",
    T.mari_icon_10: "иконы Божией Матери «Избавление От Бед Страждущих»",
    T.mari_icon_11: "иконы Божией Матери «Кипрская (Стромынская)»",
    T.mari_icon_12: "иконы Божией Матери «Кипрская»",
    T.mari_icon_13: "иконы Божией Матери «Казанская Коробейниковская»",
    T.mari_icon_14: "иконы Божией Матери «Моздокская (Иверская)»",
    T.mari_icon_15: "иконы Божией Матери «Марьиногорская»",
    T.mari_icon_16: "иконы Божией Матери «Нерушимая Стена»",
    T.mari_icon_17: "иконы Божией Матери «Одигитрия Шуйская»",
    T.mari_icon_18: "иконы Божией Матери «Прибавление Ума»",
    T.mari_icon_19: "иконы Божией Матери «Споручница грешных Корецкая»",
    T.mari_icon_20: "иконы Божией Матери «Тупичевская»",
    T.mari_icon_21: "иконы Божией Матери «Табынская»",
    T.mari_icon_22: "иконы Божией Матери «Умягчение Злых Сердец»",
    T.mari_icon_23: "иконы Божией Матери «Умиление Псковско-Печерская»",
    T.mari_icon_24: "иконы Божией Матери «Касперовская»",
    T.mari_icon_25: "иконы Божией Матери «Челнская»",
    # saints and councils
    T.sobor_valaam: "Собо́р преподо́бных отце́в, на Валаа́ме просия́вших.",
    T.varlaam_hut: "Прп. Варлаа́ма Ху́тынского (переходящее празднование).",
    T.petr_fevron_murom: "Перенесение мощей блгвв. кн. Петра, в иночестве Давида, и кн. Февронии, в иночестве Евфросинии, Муромских чудотворцев.",
    T.sobor_bessrebren: "Собор всех Бессребреников.",
    T.sobor_tversk: "Собор Тверских святых.",
    T.sobor_kuzbas: "Собор Кузбасских святых.",
    T.pahomii_kensk: "Прп. Пахомия Кенского (XVI) (переходящее празднование).",
    T.shio_mg: "Прп.Шио Мгвимского (VI) (Груз.) (переходящее празднование).",
    T.prep_dav_gar: "Преподобномучеников отцов Давидо-Гареджийских (1616) (Груз.)(переходящее празднование).",
    T.hristodul: "Мчч. Христодула и Анастасии Патрских, убиенных в Ахаии (1821) (переходящее празднование).",
    T.iosif_arimaf: "праведных Иосифа Аримафейского и Никодима (переходящее празднование).",
    T.tamar_gruz: "Блгв. Тамары, царицы Грузинской (переходящее празднование).",
    T.pm_avraam_bolg: "Перенесение мощей мч. Авраамия Болгарского (1230)(переходящее празднование).",
    T.tavif: "Прав. Тавифы (I)(переходящее празднование).",
    T.much_fereidan: "Мучеников, в долине Ферейдан (Иран) от персов пострадавших (XVII) (Груз.) (переходящее празднование).",
    T.dodo_gar: "Прп. Додо Гареджийского (Груз.)(623) (переходящее празднование).",
    T.david_gar: "Прп. Давида Гареджийского (Груз.)(VI) (переходящее празднование).",
    T.prep_sokolovsk: "Прпп. Тихона, Василия и Никона Соколовских(XVI) (переходящее празднование).",
    T.arsen_tversk: "Свт.Арсения, еп. Тверского (переходящее празднование).",
    T.much_lipsiisk: "Прмчч. Неофита, Ионы, Неофита, Ионы и Парфения Липсийских (переходящее празднование).",
    T.sobor_altai: "Собор Алтайских святых.",
    T.sobor_afonpr: "Собор всех преподобных и Богоносных отцов, во Святой Горе Афонской просиявших",
    T.sobor_belorus: "Собор Белорусских святых",
    T.sobor_vologod: "Собор Вологодских святых",
    T.sobor_novgorod: "Собор Новгородских святых",
    T.sobor_pskov: "Собор Псковских святых",
    T.sobor_piter: "Собор святых Санкт-Петербургской митрополии",
    T.sobor_udmurt: "Собор святых Удмуртской земли",
    T.sobor_volgograd: "Собор всех святых, в земле Волгоградской просиявших",
    T.sobor_ispan: "Собор святых, в земле Испанской и Португальской просиявших",
    T.sobor_kuban: "Собор святых Кубанской митрополии",
    T.sobor_chelyab: "Собор святых Челябинской митрополии",
    T.sobor_mosk: "Собор Московских святых",
    T.sobor_nnovgor: "Собор святых Нижегородской митрополии",
    T.sobor_saratov: "Собор Саратовских святых",
    T.sobor_butov: "Собор новомучеников, в Бутове пострадавших",
    T.sobor_kazahst: "Собор новомучеников и исповедников Казахстанских",
    T.sobor_karel: "Собор новомучеников и исповедников земли Карельской",
    T.sobor_perm: "Собор святых Пермской митрополии",
    T.sobor_ppech_prep: "Собор преподобных отцов Псково-Печерских",
    T.sobor_sinai_prep: "Собор преподобных отцов, на Богошественной Горе Синай подвизавшихся",
    T.sobor_much_holm: "Собор мучеников Холмских и Подляшских",
    T.sobor_vseh_prep: "Собор всех преподобных отцов, в подвиге просиявших",
    T.sobor_kpech_prep: "Собор всех преподобных отцов Киево-Печерских",
    T.sobor_smolensk: "Собор Смоленских святых",
    T.sobor_alansk: "Собор Аланских святых",
    T.sobor_german: "Собор святых, в земле Германской просиявших",
}


def property_title(tag: int) -> str:
    """Title of a tag, or '' for an unknown tag."""
    return TITLES.get(tag, "")
