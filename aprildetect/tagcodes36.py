"""Code table for the alternative 36h11 tag family."""

from __future__ import annotations

from .tagfamily import TagCodes

TAG_CODES_36H11_OTHER = TagCodes(
    36,
    11,
    (
        0xd5d628584, 0xd97f18b49, 0xdd280910e, 0xe479e9c98, 0xebcbca822, 0xf31dab3ac, 0x056a5d085, 0x10652e1d4,
        0x17b70ed5e, 0x22b1dfead, 0x265ad0472, 0x34fe91b86, 0x3ff962cd5, 0x43a25329a, 0x474b4385f, 0x4e9d243e9,
        0x5246149ae, 0x5997f5538, 0x683bb6c4c, 0x6be4a7211, 0x7e3158eea, 0x81da494af, 0x858339a74, 0x8cd51a5fe,
        0x9f21cc2d7, 0xa2cabc89c, 0xadc58d9eb, 0xb16e7dfb0, 0xb8c05eb3a, 0xd25ef139d, 0xd607e1962, 0xe4aba3076,
        0x2dde6a3da, 0x43d40c678, 0x5620be351, 0x64c47fa65, 0x686d7002a, 0x6c16605ef, 0x6fbf50bb4, 0x8d06d39dc,
        0x9baa950f0, 0x9f53856b5, 0xadf746dc9, 0xbc9b084dd, 0xd290aa77b, 0xd9e28b305, 0xe4dd5c454, 0xfad2fe6f2,
        0x181a8151a, 0x26be42c2e, 0x2e10237b8, 0x405cd5491, 0x6ff109f92, 0x7742eab1c, 0x85e6ac230, 0x8d388cdba,
        0x9f853ea93, 0xc41ea2445, 0xcf1973594, 0x14a34a333, 0x31eacd15b, 0x44377ee34, 0x6c79d2dab, 0x73cbb3935,
        0x89c155bd3, 0x8d6a46198, 0x91133675d, 0xa708d89fb, 0xae5ab9585, 0xb9558a6d4, 0xb98743ab2, 0xd6cec68da,
        0x1506bcaef, 0x4becd217a, 0x4f95c273f, 0x658b649dd, 0xa76c4b1b7, 0xecf621f56, 0x1c8a56a57, 0x3628e92ba,
        0x53706c0e2, 0x7809cfa94, 0xc88e77982, 0xe97eead6f, 0x5af40604a, 0xffa6463eb, 0x5eceaf9ed, 0x7c1632815,
        0xc1a0095b4, 0xe9e25d52b, 0x3a6705419, 0xa8333012f, 0x4ce5704d0, 0x508e60a95, 0x877476120, 0xa864e950d,
        0xea45cfce7, 0x19da047e8, 0x24d4d5937, 0x54690a438, 0x6e079cc9b, 0x99f2e11d7, 0x499ff26c7, 0x50f1d3251,
        0x66e7754ef, 0x49d1abaa5, 0x96ad633ce, 0x9a5653993, 0xaca30566c, 0x8be44b65d, 0xb4269f5d4, 0xdc68f354b,
        0x4dde0e826, 0xd548cbd9f, 0xfd8b1fd16, 0x76521bb7b, 0xd1d194bb8, 0xd57a8517d, 0xd92375742, 0xcab16d40c,
        0x730c9dd72, 0xad9ba39c2, 0xb14493f87, 0x185409cad, 0x77ae2c68d, 0x94f5af4b5, 0x0a13bad55, 0x61ea437cd,
        0xa022399e2, 0xbd69bc80a, 0x203b163d1, 0x7bba8f40e, 0x784358227, 0xc92b728d1, 0x92a8cfa02, 0x9da3a0b51,
        0xdcd4350bc, 0x4aa05fdd2, 0x60c7bb44e, 0x4b358b96c, 0x612b2dc0a, 0x775289286, 0x7ea469e10, 0x09e9d0d2c,
        0x067299b45, 0xb9c89b5fa, 0x9560f1026, 0x62b8f7afa, 0xbac139950, 0x58b6c4d01, 0xa5927c62a, 0xe77362e04,
        0xf29fed331, 0x903205f26, 0xc36f2afec, 0xae72270a4, 0x3d2ec51a7, 0x82ea55324, 0x1ca1c4576, 0xa40c81aef,
        0xbddccd730, 0x0e617561e, 0x585b218fa, 0x969317b0f, 0x588cdacd8, 0x67309c3ec, 0x8c5f2b938, 0x4142f72dd,
        0x06e5aaa6b, 0x626523aa8, 0xb6c475339, 0xc56836a4d, 0x4647f83b4, 0x0908a04f5, 0x7862950fb, 0xd445808f4,
        0x28d68b563, 0x04d25374b, 0xc8bd52fc0, 0x06f5491d5, 0x27e5bc5c2, 0x2bc065f65, 0x96dc3ea0c, 0xfdb9fb354,
        0x47b3a7630, 0xd7372a6ab, 0x372678c25, 0xe768b5caf, 0x437d5a886, 0x2b091f757, 0x91b522cc1, 0x62846097c,
        0x3aa57f1c1, 0x263da6e13, 0xfa841bcb5, 0x157ebf02a, 0xf586e9f93, 0xecaf0e8ce, 0x82ef46939, 0x847d10829,
        0x68919e513, 0x2aeed3e98, 0x11265760c, 0x1ce80d6d3, 0x0e4c1b374, 0x68b0db3e7, 0x1c389627a, 0xfb79dc26b,
        0x9379975a4, 0x064ac3391, 0x706dfdae2, 0x44edfb117, 0x86a4f78c8, 0xaebd61816, 0xf53fd690b, 0xb8f91cda2,
        0xf0a6173a5, 0x12c0e1ec6, 0xd1a6e0664, 0x6bf37b450, 0x62b82d5cf, 0xe5f46d153, 0x0d1438d4b, 0x5af82d134,
        0x6ea0ef91f, 0x9ff4a76ee, 0xde5e56ce1, 0xb5c82ed18, 0x5b50f279b, 0xd7f297fa3, 0xef444ad53, 0xa8c9a5013,
        0x3d300e4f1, 0x33fc8fa25, 0x43d277c22, 0x9d2c1d435, 0x5f8952dba, 0xf0cc59103, 0xd2f779af6, 0xb5e97f461,
        0x7f0b3918b, 0xe42e63e1a, 0x769bc1897, 0x97bdee062, 0x792229add, 0x816ca89bd, 0xd41446335, 0x3f572b065,
        0x2a93af8b0, 0xcadde9ac9, 0x7176b93c1, 0x84b15c29b, 0x9b9f9c88f, 0x537511feb, 0xee8891d4f, 0x5dc83b096,
        0x05bd1b4a0, 0x2e073e7cc, 0x0b5f174c6, 0xb184d5e98, 0xd0ef4e74a, 0x0ddad25b7, 0xbd16e63f6, 0x4aa64f025,
        0xa252eda74, 0xd940d24b4, 0x9745a041b, 0x055322c79, 0x7022f6a83, 0xa31416eac, 0x96b2880f6, 0x48d385322,
        0x14d46c8f9, 0x11e4d63b7, 0x379614f93, 0x71eda5cc5, 0xaa05e1e39, 0xcee09d333, 0x52c976570, 0x023252178,
        0x599fac8f4, 0xbb0a48854, 0x98cd630bf, 0x2d8f6f9a4, 0xf5c05a72d, 0x9ed9d672b, 0x50d8b8ce3, 0xe59ac55c8,
        0xe09d938a6, 0x4ada4f38b, 0xbb85a794e, 0x5544e5f55, 0x9a3db8244, 0xe3784e95d, 0x796c81d2b, 0x6cebb60a1,
        0x27b2d55b4, 0x6de945a0c, 0x4a69d0af9, 0x6afea0adf, 0x158987899, 0x1b528fb48, 0x6d183275e, 0x73afeed3a,
        0x1a7a77a10, 0x4be59d2fe, 0x2ad522b12, 0xa82d445fd, 0xbbcb59c93, 0xe71e94895, 0x75b14896f, 0xb0afb721a,
        0x065d8e6c8, 0x372810d9c, 0xb77603728, 0xad78c1f44, 0x90ca91da0, 0x2e74184b4, 0xc2964c0aa, 0xb07f7a899,
        0x8ee694edd, 0x1ad7caf87, 0x2035916c5, 0xcd1670631, 0x1611c2a77, 0x8a1a06962, 0xdb970149a, 0x5778c6bb4,
        0x3fab695fe, 0x014b9cc35, 0x604be4377, 0xfd49501f1, 0xe2b710c4d, 0x6bf7f4a88, 0x0adf98124, 0xc5ee49ade,
        0xe4c34b0ea, 0x9b5e0047d, 0x4002b5929, 0x4e9a35492, 0x908aedae9, 0xa0bc790ed, 0xd12b583ba, 0x431b08264,
        0xb7b33afc8, 0xd115672f8, 0x253296b16, 0xbd5e4f6ed, 0xf1276fc55, 0x5feaa426b, 0x2d0955cbf, 0xcb2ade90e,
        0x08b0fe749, 0x2709d6730, 0x0edc7ec97, 0xa7c74d431, 0x1536402ea, 0x61936f66d, 0x7ec973bc9, 0xa00a12d3d,
        0xc6ed2ccf6, 0x8f87c4b9a, 0xf049ee52b, 0x0d1fa9777, 0x85175a497, 0x2d917c5c5, 0xfc61287b4, 0x63ce55156,
        0x659cac663, 0xbb4b8174f, 0x70bd5be0b, 0xfb3da5f18, 0x917b001e3, 0x516870f16, 0x03bb5ac33, 0x2a510ec0c,
        0x07ecd1ae2, 0x06642c91a, 0xcc7c83662, 0xb88d2c60e, 0x40d35e87e, 0x452f5656e, 0xf8c5e5640, 0xc68372145,
        0x6b61cb49e, 0x066ce5035, 0x151c05dd0, 0xad92f9119, 0x8fa874156, 0xd7d545982, 0x2602c7a8e, 0x0d9054ac8,
        0xb85332ce0, 0xa8e7f583c, 0xa2534a713, 0x77ce78732, 0x6b605c6c5, 0x8101603e6, 0x9573cd8f0, 0xa18bba0ab,
        0xf5d224ae1, 0x9ecb4dfd4, 0x2e48c9e03, 0x79b4c6ae0, 0x60e6b0713, 0xea6a8420d, 0xa22971a8f, 0x605c053fd,
        0x57678633a, 0xea85c3395, 0x7fda1da74, 0x9824459ca, 0xb2eee31f2, 0x4a34b0db1, 0xb5bbbd933, 0x583d9c190,
        0xc93e6091c, 0xdca7c6e3b, 0x214d69b74, 0x525894f7f, 0x21be0e083, 0xf0dbd2784, 0x0ffac88d9, 0x57f7e33e5,
        0x4a7301d85, 0x8887af6f6, 0x1b8ccb3a1, 0x68c1b2878, 0x78b6bf950, 0x63b9aa851, 0x7ed12f23a, 0x350eb35b2,
        0x561503189, 0x3f16ac63c, 0xd2fd4b06c, 0xa7c49627e, 0x36b9f5d0a, 0xbca21c149, 0xba5bc28ef, 0xce2c2b89c,
        0x776bc0448, 0xce170f268, 0x8f57303c3, 0x74e5fcc9e, 0x46de67b7e, 0x2b98bd7aa, 0xb5c41dc2e, 0x12e1e50f8,
        0x875f6fcda, 0xf90ea702d, 0x7ed051595, 0x9d8da07b8, 0xbc30d09ed, 0x77ad8306b, 0x82d4a0885, 0xf4e1b7a04,
        0xb427eabda, 0xdb1b28f5e, 0xe5f911de5, 0xb8ff4c115, 0x3185fbcf4, 0xefda16bdf, 0xeaa3f6c63, 0x9a3f4f520,
        0x6317c6e21, 0xde1ac8909, 0xb962e4d06, 0x8a8cc1536, 0x0abebf2d5, 0x6a3787f5f, 0x62cc2622f, 0x3196aa59f,
        0x9b6816c6b, 0x95f398661, 0x2b1673eb7, 0xc9cf19ba7, 0x44394782a, 0xd02e2d199, 0xe517f16dc, 0x433df5666,
        0xdbfb6521f, 0x6316ed9fb, 0x0681b072a, 0x24e7e3614, 0x3049f22da, 0x245b47d67, 0x032e59d5d, 0x78f512121,
        0xf76e98aac, 0x20e313ad6, 0x9947bd319, 0x0719aab9f, 0xabe40e6b2, 0x9bbec96c6, 0xcf05e6446, 0xee3c76b79,
        0xe9317cc92, 0x9bf9aa92b, 0x13fe98495, 0xd931239a6, 0x7264aced9, 0x04ed957b4, 0xbb7021cbb, 0x4609308b5,
        0x2d5c52c38, 0xceb22ad4f, 0x82a47a446, 0x04d68909a, 0x832cdf368, 0x242ed1118, 0xd1dda2014, 0x901b6a04e,
        0x19c1e9514, 0x3e9c0c97f, 0x1e814bce3, 0x55b40b44d, 0xeff162399, 0x4012da58a, 0x1d4d90e43, 0x50e79facd,
        0x35ef088ba, 0x774709d00, 0xd32e575b3, 0x54c5cfff2, 0x59bbd73fb, 0x3b2dc7e8b, 0x13a74d09f, 0xc5a21e37f,
        0x7aab49b28, 0x2793aa17a, 0x3a6673575, 0x78c27371e, 0x1788da29c, 0x8b5bb6078, 0xa5c506a80, 0xc2c487d6a,
        0xf238647ac, 0x601f5e6e2, 0x2db5d412a, 0xd7c46f24a, 0xe4e0b67f5, 0xe94793093, 0xe07e85846, 0xa04f6f205,
        0xe47cbc125, 0x9022fb419, 0xc2127ead8, 0xc670f0e63, 0xd282518cf, 0x63e8d8335, 0x2aa63408e, 0xb011851aa,
        0x2df8c686f, 0xa31f8c5f1, 0xe8c09cecb, 0x4cd645fb9, 0xa63b5d9f5, 0xd74dd32d6, 0xf6869a32a, 0xb725dae3e,
        0xc5b27c981, 0x67d0118b8, 0xb3fdb04fa, 0xf11838f31, 0x7e73b5fb9, 0x24ec2067a, 0x8aaf3bcea, 0x04a06dca0,
        0x70a03ed6b, 0x70dc29b18, 0x4d75699a9, 0xaedc558d9, 0x62590b9af, 0x5f9258453, 0xf04a9a9ce, 0xcd1feb280,
        0x7300b05a7, 0xadb7ab52c, 0x59afeb236, 0xf1de62e03, 0xf103ba210, 0x7cf6472d5, 0xf84bf1908, 0xa4952dc03,
        0x43d506f47, 0x8e90eed24, 0x9c04974e9, 0x953aef583, 0x3d839c1bc, 0x0348ac64f, 0x2a1284fc1, 0x9fc565ccd,
        0x57118e8c4,
    ),
)
"""36 bits, minimum Hamming distance 11, minimum complexity 10."""