WEDDING_INFO_URL = "/api/v1/wedding-info"
WEDDING_PHOTOS_URL = "/api/v1/wedding-photos"
MAIN_WEDDING_PHOTO_URL = "/api/v1/wedding-photos/main"
GALLERY_PHOTOS_URL = "/api/v1/wedding-photos/gallery"
