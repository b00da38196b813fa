"""
Hard-coded website configuration.

Written to the store on first boot and used as the base of every merge.
"""

FOOD_MENU_LIST_KEY = 'sections'
WINE_MENU_LIST_KEY = 'categories'

PRODUCT_BUTTON_TEXT_FALLBACK = 'VEURE LA NOSTRA CARTA'
MENU_GLOBAL_FOOTER_FALLBACK = '* Preus en euros, impostos inclosos. Consultar al·lèrgens al personal de sala.'

DEFAULT_CONFIG = {
    'brand': {
        'logoUrl': ''
    },
    'adminSettings': {
        'customDisplayName': '',
        'maxExtraMenus': 10,
        'maxHeroImages': 5,
        'maxProductImages': 5,
        'maxHistoricImages': 5
    },
    'menuGlobalFooter': MENU_GLOBAL_FOOTER_FALLBACK,
    'hero': {
        'reservationVisible': True,
        'formType': 'reservation',
        'reservationFormTitle': 'Reserva Taula!',
        'reservationFormSubtitle': "omple'l o truca'ns!",
        'reservationPhoneNumber': '977 84 08 70',
        'reservationButtonText': 'Reservar Ara!',
        'stickyNoteText': "Obert tot l'any!",
        'backgroundImages': [
            'https://www.ermitaparetdelgada.com/wp-content/uploads/2023/04/ERMITA_slider_5.png',
            'https://www.ermitaparetdelgada.com/wp-content/uploads/2023/04/ERMITA_slider_4.png'
        ],
        'reservationTimeStart': '13:00',
        'reservationTimeEnd': '15:30',
        'reservationTimeInterval': 15,
        'reservationErrorMessage': "Ho sentim, l'horari de reserva és de",
        'formNameLabel': 'Nom:',
        'formPhoneLabel': 'Telèfon:',
        'formDateLabel': 'Dia i hora:',
        'formPaxLabel': 'Gent:',
        'formNotesLabel': 'Notes:',
        'formPrivacyLabel': 'Si, accepto la privacitat.',
        'formCallUsLabel': "O truca'ns:",
        'heroDescription': 'Una experiència gastronòmica que uneix tradició i modernitat en un entorn '
                           'històric inoblidable.',
        'heroSchedule': 'De dimarts a diumenge de 11:00 a 17:00 h.'
    },
    'intro': {
        'visible': True,
        'smallTitle': 'Filosofia',
        'mainTitle': 'Menjar típic català i casolà.',
        'description': '"Calçotades com al mas, cuina tradicional catalana i carns a la brasa amb llenya '
                       "d’olivera. Gaudint de l'entorn històric i la tranquil·litat de la nostra terra.\""
    },
    'specialties': {
        'visible': True,
        'sectionTitle': 'Autèntics Sabors',
        'mainTitle': 'Les Nostres Especialitats',
        'description': "Una selecció de plats i vins que representen l'essència de la nostra terra, "
                       'cuinats amb passió i producte de proximitat.',
        'items': [
            {
                'title': 'Carns a la Brasa',
                'subtitle': "Llenya d'olivera",
                'image': 'https://images.unsplash.com/photo-1555939594-58d7cb561ad1?q=80&w=2070'
                         '&auto=format&fit=crop',
                'badge': '',
                'description': 'Descobreix els sabors autèntics de la nostra terra, cuinats amb passió i '
                               'respecte pel producte.',
                'visible': True
            },
            {
                'title': 'Calçotades',
                'subtitle': 'Salsa Romesco',
                'image': 'https://images.unsplash.com/photo-1615937657715-bc7b4b7962c1?q=80&w=2070'
                         '&auto=format&fit=crop',
                'badge': 'Temporada',
                'description': 'Descobreix els sabors autèntics de la nostra terra, cuinats amb passió i '
                               'respecte pel producte.',
                'visible': True
            },
            {
                'title': 'Vins de Proximitat',
                'subtitle': 'DO Tarragona',
                'image': 'https://images.unsplash.com/photo-1510812431401-41d2bd2722f3?q=80&w=2070'
                         '&auto=format&fit=crop',
                'badge': 'Celler',
                'description': 'Descobreix els sabors autèntics de la nostra terra, cuinats amb passió i '
                               'respecte pel producte.',
                'visible': True
            }
        ]
    },
    'philosophy': {
        'visible': True,
        'sectionTitle': 'Filosofia i Entorn',
        'titleLine1': 'Cuina amb ànima,',
        'titleLine2': 'arrelada a la terra.',
        'description': "Més que un restaurant, som un refugi de tradició on el temps s'atura i els "
                       'sabors expliquen històries antigues.',
        'cardTag': "\"L'aroma dels nostres camps a la taula\"",
        'productTitle': 'Producte de Proximitat',
        'productDescription': 'Cuinem amb productes del "troç". Les nostres hortalisses venen directament '
                              'dels horts veïns i treballem amb ramaders locals per oferir la millor '
                              'qualitat, respectant el cicle de cada estació.',
        'productButtonText': PRODUCT_BUTTON_TEXT_FALLBACK,
        'productImages': [
            'https://images.unsplash.com/photo-1541457523724-95f54f7740cc?q=80&w=2070&auto=format&fit=crop',
            'https://images.unsplash.com/photo-1615937657715-bc7b4b7962c1?q=80&w=2070&auto=format&fit=crop'
        ],
        'historicTitle': 'Un entorn històric',
        'historicDescription': "Situat a l'Ermita de la Paret Delgada, gaudiràs d'un paratge únic que "
                               'inspira calma. Les parets de pedra i els antics murs contenen el pas del '
                               'temps, convertint cada àpat en una celebració en companyia.',
        'historicLinkUrl': 'https://es.wikipedia.org/wiki/Ermita_de_Santa_Mar%C3%ADa_de_Paretdelgada',
        'historicImages': [
            'https://images.unsplash.com/photo-1582298539230-22c6081d5821?q=80&w=2574&auto=format&fit=crop',
            'https://www.ermitaparetdelgada.com/wp-content/uploads/2023/04/ERMITA_slider_2.png'
        ]
    },
    'gastronomy': {
        'visible': True,
        'topTitle': 'LA NOSTRA PROPOSTA',
        'mainTitle': 'Gastronomia Local',
        'description': 'Productes de quilòmetre zero, receptes de tota la vida i el sabor autèntic de la brasa.',
        'card1': {
            'title': 'Menú Diari',
            'subtitle': 'DE DIMARTS A DIVENDRES',
            'description': '',
            'footerText': 'Cuina de mercat segons temporada',
            'price': '18€',
            'image': 'https://images.unsplash.com/photo-1546069901-ba9599a7e63c?q=80&w=2080&auto=format&fit=crop',
            'buttonText': 'VEURE MENÚ',
            'targetTab': 'daily'
        },
        'card2': {
            'title': 'Carta Completa',
            'subtitle': 'CAPS DE SETMANA I FESTIUS',
            'description': 'Especialitats a la brasa, carns madurades i els clàssics de la cuina catalana.',
            'price': '',
            'footerText': '',
            'image': 'https://images.unsplash.com/photo-1544025162-d76694265947?q=80&w=2069&auto=format&fit=crop',
            'buttonText': 'DESCOBRIR CARTA',
            'targetTab': 'food'
        },
        'footerTitle': 'TAMBÉ DISPONIBLE',
        'footerLinks': [
            {'label': 'Menú Calçotada', 'icon': 'restaurant', 'targetTab': 'extra_1'},
            {'label': 'Menú Infantil', 'icon': 'child_care', 'targetTab': 'food'},
            {'label': 'Carta de Vins', 'icon': 'wine_bar', 'targetTab': 'wine'}
        ]
    },
    'dailyMenu': {
        'title': 'Menú Diari',
        'subtitle': 'DE DIMARTS A DIVENDRES',
        'icon': 'lunch_dining',
        'visible': True,
        'recommended': True,
        'price': '18€',
        'vat': 'IVA inclòs',
        'disclaimer': 'Vàlid de dimarts a divendres (no festius)',
        'sections': [
            {
                'title': 'PRIMERS PLATS',
                'items': [
                    {'nameCa': 'Amanida de formatge de cabra amb fruits secs',
                     'nameEs': 'Ensalada de queso de cabra'},
                    {'nameCa': "Canelons casolans de l'àvia", 'nameEs': 'Canelones caseros de la abuela'},
                    {'nameCa': 'Escudella barrejada', 'nameEs': 'Escudella catalana'}
                ]
            }
        ],
        'drinks': ['Aigua', 'Vi de la casa', 'Gasosa'],
        'infoIntro': 'El menú inclou primer plat, segon plat, postres, pa, aigua i vi.',
        'infoAllergy': 'Si tens alguna al·lèrgia, informa el nostre personal.',
        'footerText': 'Cuina de mercat'
    },
    'foodMenu': {
        'title': 'Carta de Menjar',
        'icon': 'restaurant_menu',
        'visible': True,
        'recommended': False,
        FOOD_MENU_LIST_KEY: [
            {
                'id': 'sec_tapas',
                'category': 'TAPES · TAPAS',
                'icon': 'tapas',
                'items': [
                    {'nameCa': "Gilda d'anxova de Perellò 1898",
                     'nameEs': 'Anxova 00, oliva gordal, piparra de Navarra i tomàquet sec (1 unitat).',
                     'price': '3.50€'}
                ]
            }
        ]
    },
    'wineMenu': {
        'title': 'Carta de Vins',
        'icon': 'wine_bar',
        'visible': True,
        'recommended': False,
        WINE_MENU_LIST_KEY: [
            {
                'category': 'VINS NEGRES',
                'groups': [
                    {
                        'sub': 'D.O. TERRA ALTA',
                        'items': [
                            {'name': 'Llàgrimes de Tardor', 'desc': 'Garnatxa, Carinyena', 'price': '18.50€'}
                        ]
                    }
                ]
            }
        ]
    },
    'groupMenu': {
        'title': 'Menú de Grup',
        'subtitle': 'MÍNIM 10 PERSONES',
        'icon': 'diversity_3',
        'visible': True,
        'recommended': False,
        'price': 'Consultar',
        'vat': 'IVA inclòs',
        'disclaimer': 'Mínim 10 persones',
        'sections': [],
        'drinks': ['Aigua', 'Vi de la casa'],
        'infoIntro': 'El menú inclou...',
        'infoAllergy': 'Consulteu al·lèrgens.'
    },
    'extraMenus': [],
    'contact': {
        'importantNoteVisible': True,
        'infoVisible': True,
        'socialVisible': True,
        'formVisible': True,
        'importantNoteTitle': 'Nota Important',
        'importantNoteMessage1': 'Obert caps de setmana i festius.',
        'importantNoteMessage2': 'Reserves recomanades.',
        'phoneNumbers': ['+34 977 84 08 70'],
        'sectionTitle': 'Contacte i Ubicació',
        'locationTitle': 'On som',
        'addressLine1': 'Ctra. de la Selva a Vilallonga, Km 2',
        'addressLine2': '43470 La Selva del Camp, Tarragona',
        'schedule': 'Dimarts a Diumenge 13:00 - 16:00',
        'directionsButtonText': 'Com arribar-hi',
        'mapUrl': 'https://goo.gl/maps/example',
        'instagramUrl': 'https://instagram.com/example',
        'socialTitle': 'Segueix-nos',
        'socialDescription': 'Per estar al dia de les nostres novetats.',
        'socialButtonText': 'Instagram',
        'formTitle': "Envia'ns un missatge",
        'formNameLabel': 'Nom',
        'formEmailLabel': 'Email',
        'formPhoneLabel': 'Telèfon',
        'formSubjectLabel': 'Assumpte',
        'formMessageLabel': 'Missatge',
        'formButtonText': 'Enviar'
    },
    'navbar': {
        'reserveButtonText': 'Reserva'
    },
    'emailSettings': {
        'enabled': False,
        'recipients': [],
        'autoReply': False,
        'autoReplySubject': 'Hem rebut el teu missatge',
        'autoReplyMessage': 'Gràcies per contactar amb nosaltres. Et respondrem al més aviat possible.'
    }
}
